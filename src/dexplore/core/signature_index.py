from collections import defaultdict
import logging
import re
from typing import Iterator

from dexplore.core.word_store import WordStore

logger = logging.getLogger(__name__)

_NON_LETTER = re.compile(r"[^a-z]")


def compute_signature(word: str) -> str:
    """
    Canonical sorted-letter key for a word, e.g. capstan => aacnpst.
    Case is folded and anything that is not a letter is dropped, so two
    words share a signature exactly when they are anagrams of each other.
    """
    return "".join(sorted(_NON_LETTER.sub("", word.lower())))


class SignatureIndex:
    """Maps each signature to the words that are permutations of it.

    Built once from a WordStore and read-only afterwards, so it can be shared
    between readers without locking.
    """

    def __init__(self, buckets: dict[str, tuple[str, ...]]) -> None:
        self._buckets = buckets
        self._word_count = sum(len(words) for words in buckets.values())

    @classmethod
    def build(cls, word_store: WordStore) -> 'SignatureIndex':
        buckets: defaultdict[str, list[str]] = defaultdict(list)
        skipped = 0
        for word in word_store:
            # Signatures only know a-z; an accented letter would vanish and over-match.
            if not word.isascii():
                skipped += 1
                continue
            buckets[compute_signature(word)].append(word)

        index = cls({sig: tuple(words) for sig, words in buckets.items()})
        logger.info(f"Built in-memory anagram index with {len(index)} signatures from {index.word_count} words")
        if skipped:
            logger.info(f"Left {skipped} non-ASCII words out of the anagram index")
        return index

    @property
    def word_count(self) -> int:
        return self._word_count

    def lookup(self, signature: str) -> tuple[str, ...]:
        return self._buckets.get(signature, ())

    def signatures(self) -> Iterator[str]:
        return iter(self._buckets)

    def __contains__(self, signature: object) -> bool:
        return signature in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)
