"""
Scrabble search: every dictionary word that can be spelled from a subset of
the given letters.

The letters are sorted once, then every combination of positions of size
MIN_SIGNATURE_LENGTH..len(letters) is joined into a candidate signature and
looked up in the SignatureIndex. Because the source letters are sorted, each
combination is already in signature order. E.g. for 'abcd' the candidates are
ab ac ad bc bd cd abc abd acd bcd abcd.

Combinations are taken by position, so repeated letters produce repeated
candidates ('aab' yields 'ab' twice). Those are probed again rather than
filtered; the ranker removes the duplicate words afterwards.

The number of candidates for n letters is 2**n - n - 1, so each extra letter
roughly doubles the work. Callers can watch progress and cancel.
"""
from itertools import combinations
import logging
from math import comb
from typing import Callable, Iterator, Optional, Protocol

from dexplore.config import explorer_config
from dexplore.core.errors import QueryCancelled
from dexplore.core.signature_index import SignatureIndex

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class CancelToken(Protocol):
    """Anything with an is_set() method, e.g. threading.Event."""

    def is_set(self) -> bool: ...


def letter_multiset(letters: str) -> list[str]:
    return sorted(letters.lower())


def candidate_count(length: int) -> int:
    """Exact number of candidate signatures generated for an input of this length."""
    return sum(comb(length, size) for size in range(explorer_config.MIN_SIGNATURE_LENGTH, length + 1))


def candidate_signatures(
    letters: str,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelToken] = None,
) -> Iterator[str]:
    """
    Yield every candidate signature for the letters, shortest first.

    progress(size, total) is called once with size 0 as enumeration starts and
    again after each size is exhausted, but only for inputs longer than
    PROGRESS_THRESHOLD. If cancel becomes set the generator
    raises QueryCancelled.
    """
    multiset = letter_multiset(letters)
    total = len(multiset)
    report = progress is not None and total > explorer_config.PROGRESS_THRESHOLD
    if report:
        progress(0, total)

    for size in range(explorer_config.MIN_SIGNATURE_LENGTH, total + 1):
        for combo in combinations(multiset, size):
            if cancel is not None and cancel.is_set():
                logger.debug(f"Enumeration cancelled at size {size} of {total}")
                raise QueryCancelled(f"search for {letters!r} cancelled")
            yield "".join(combo)
        if report:
            progress(size, total)


class SubsetMatcher:
    def __init__(self, index: SignatureIndex) -> None:
        self._index = index

    def match(
        self,
        letters: str,
        progress: Optional[ProgressCallback] = None,
        cancel: Optional[CancelToken] = None,
    ) -> list[str]:
        """
        Return the raw matches for the letters: every word in every bucket hit
        by a candidate, in probe order, duplicates included.
        """
        logger.debug(f"Matching {letters!r}: {candidate_count(len(letters))} candidates")
        results: list[str] = []
        for signature in candidate_signatures(letters, progress, cancel):
            results.extend(self._index.lookup(signature))
        return results
