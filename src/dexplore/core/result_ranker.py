from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class ResultSet:
    """Words returned to the caller for one query, in final display order."""
    words: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __bool__(self) -> bool:
        return bool(self.words)


EMPTY_RESULT = ResultSet()


def _rank_key(word: str) -> tuple[int, str]:
    # Longest first, then alphabetical within a length.
    return (-len(word), word)


def rank(raw_results: Iterable[str]) -> ResultSet:
    """Drop duplicate words and order the rest longest first, then alphabetically."""
    unique = dict.fromkeys(raw_results)
    return ResultSet(tuple(sorted(unique, key=_rank_key)))
