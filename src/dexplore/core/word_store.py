import logging
import re
from typing import Callable, Iterable, Iterator

from dexplore.core.errors import SourceUnavailable

logger = logging.getLogger(__name__)

# Proper nouns, contractions and hyphenated words never make it into the store.
_PROPER_NOUN = re.compile(r"\A[A-Z]")
_REJECTED_CHARS = re.compile(r"['-]")
# Bytes that were not valid UTF-8, kept as lone surrogates so they round-trip.
_UNDECODABLE = re.compile("[\udc80-\udcff]")


def _keep_word(word: str) -> bool:
    if not word:
        return False
    if _PROPER_NOUN.match(word):
        return False
    return not _REJECTED_CHARS.search(word)


class WordStore:
    """Ordered, read-only list of the words loaded from a word list.

    Words keep their original spelling and load order; the store is never
    modified once built.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: tuple[str, ...] = tuple(words)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'WordStore':
        """Create a store from raw word-list lines without file I/O."""
        kept = []
        rejected = 0
        for line in lines:
            word = line.rstrip()
            if _keep_word(word):
                kept.append(word)
            else:
                rejected += 1
        logger.info(f"Loaded {len(kept)} words ({rejected} lines rejected)")
        return cls(kept)

    @classmethod
    def load(cls, path: str, open: Callable = open) -> 'WordStore':
        try:
            with open(path, "r", encoding="utf-8", errors="surrogateescape") as f:
                store = cls.from_lines(f)
        except OSError as e:
            logger.warning(f"Could not read word list {path}: {e}")
            raise SourceUnavailable(path, e.strerror or str(e)) from e

        undecodable = sum(1 for word in store if _UNDECODABLE.search(word))
        if undecodable:
            logger.warning(f"{undecodable} words in {path} are not valid UTF-8; kept byte for byte")
        return store

    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"WordStore({len(self._words)} words)"
