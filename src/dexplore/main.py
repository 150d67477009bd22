#!/usr/bin/env python3

import argparse
import logging
import os
import sys

from dexplore.config import explorer_config
from dexplore.core.errors import SourceUnavailable
from dexplore.core.query_engine import QueryEngine
from dexplore.core.word_store import WordStore
from dexplore.shell.input_controller import ExplorerShell

logger = logging.getLogger(__name__)

MISSING_DICTIONARY = """
  Sorry, this script couldn't be run because the expected dictionary
  doesn't exist. Many Unix-type systems have a dictionary located at
  /usr/share/dict/words, but this system doesn't. Point --words (or the
  DEXPLORE_WORDS environment variable) at a word list with one word per line.
"""


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search a word list with regular expressions or Scrabble letters.")
    parser.add_argument("--words", default=explorer_config.DICTIONARY_PATH,
                        help="Word list to load, one word per line")
    parser.add_argument("--max-letters", type=int, default=explorer_config.MAX_SCRAB_LETTERS,
                        help="Refuse Scrabble searches with more letters than this")
    parser.add_argument("--verbose", action="store_true", help="Log index building and query dispatch")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Words that were not valid UTF-8 are written back out as the bytes they were read as.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")

    if sys.stdout.isatty():
        os.system("clear")

    try:
        word_store = WordStore.load(args.words)
    except SourceUnavailable as e:
        logger.error(e)
        print(MISSING_DICTIONARY)
        return 1
    print("Dictionary loaded.")
    engine = QueryEngine(word_store)
    print("Patterns loaded.\n")

    ExplorerShell(engine, max_letters=args.max_letters).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
