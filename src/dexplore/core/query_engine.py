import asyncio
from dataclasses import dataclass
from enum import Enum
import logging
import threading
from typing import Callable, Optional

from dexplore.core import pattern_matcher
from dexplore.core.result_ranker import EMPTY_RESULT, ResultSet, rank
from dexplore.core.signature_index import SignatureIndex
from dexplore.core.subset_matcher import CancelToken, ProgressCallback, SubsetMatcher
from dexplore.core.word_store import WordStore

logger = logging.getLogger(__name__)

QueryKind = Enum("QueryKind", ["PATTERN", "SCRAB"])


@dataclass(frozen=True)
class Request:
    """One query from the shell. Repeating a search means submitting the same Request again."""
    kind: QueryKind
    value: str

    @classmethod
    def pattern(cls, value: str) -> 'Request':
        return cls(QueryKind.PATTERN, value)

    @classmethod
    def scrab(cls, value: str) -> 'Request':
        return cls(QueryKind.SCRAB, value)


class QueryEngine:
    """Answers pattern and Scrabble requests against a loaded word list."""

    def __init__(self, word_store: WordStore, index: Optional[SignatureIndex] = None) -> None:
        self._word_store = word_store
        self._index = index if index is not None else SignatureIndex.build(word_store)
        self._subset_matcher = SubsetMatcher(self._index)

    @classmethod
    def from_path(cls, path: str, open: Callable = open) -> 'QueryEngine':
        return cls(WordStore.load(path, open=open))

    @property
    def word_store(self) -> WordStore:
        return self._word_store

    @property
    def index(self) -> SignatureIndex:
        return self._index

    def run(
        self,
        request: Request,
        progress: Optional[ProgressCallback] = None,
        cancel: Optional[CancelToken] = None,
    ) -> ResultSet:
        """
        Run a single request.

        Raises InvalidPattern for a bad regular expression and QueryCancelled if
        cancel is set while a Scrabble search is still enumerating.
        """
        logger.debug(f"Running {request.kind.name} query {request.value!r}")
        # Searching for nothing finds nothing, in either mode.
        if not request.value:
            return EMPTY_RESULT
        if request.kind == QueryKind.PATTERN:
            return pattern_matcher.search(request.value, self._word_store)
        if request.kind == QueryKind.SCRAB:
            raw = self._subset_matcher.match(request.value, progress, cancel)
            return rank(raw)
        raise ValueError(f"Unknown query kind: {request.kind}")

    async def run_async(
        self,
        request: Request,
        progress: Optional[ProgressCallback] = None,
    ) -> ResultSet:
        """
        Run a request on a worker thread. Cancelling the awaiting task stops
        the enumeration as well, so an abandoned search does not keep a core busy.
        """
        cancel = threading.Event()
        try:
            return await asyncio.to_thread(self.run, request, progress, cancel)
        except asyncio.CancelledError:
            logger.debug(f"Abandoning {request.kind.name} query {request.value!r}")
            cancel.set()
            raise
