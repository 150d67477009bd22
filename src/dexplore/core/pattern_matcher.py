import logging
import re

from dexplore.core.errors import InvalidPattern
from dexplore.core.result_ranker import ResultSet
from dexplore.core.word_store import WordStore

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


def search(pattern: str, word_store: WordStore) -> ResultSet:
    """
    Words containing a match for the regular expression anywhere in them,
    in dictionary order. 'berg' finds iceberg as well as berg.
    """
    regex = compile_pattern(pattern)
    matches = tuple(word for word in word_store if regex.search(word))
    logger.debug(f"Pattern {pattern!r} matched {len(matches)} words")
    return ResultSet(matches)
