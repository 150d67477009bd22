"""Terminal output for query results: wrapping, counts and paging of long lists."""

import pydoc
import sys
import textwrap
from typing import Callable, TextIO

from dexplore.config import explorer_config
from dexplore.core.result_ranker import ResultSet


def wrap(text: str, width: int = explorer_config.WRAP_WIDTH) -> str:
    return textwrap.fill(text, width=width, break_long_words=False, break_on_hyphens=False)


def num_found(result: ResultSet) -> str:
    return f"{result.count} found."


class ResultsDisplay:
    def __init__(self, out: TextIO = sys.stdout, pager: Callable[[str], None] = pydoc.pager) -> None:
        self._out = out
        self._pager = pager

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def progress_dots(self) -> 'ProgressDots':
        return ProgressDots(self._out)

    def show_pattern_results(self, result: ResultSet) -> None:
        if not result:
            self.say("No results found.\n")
            return
        body = wrap(", ".join(result.words))
        if result.count > explorer_config.PAGER_THRESHOLD:
            self._pager(num_found(result) + "\n" + body + "\n")
            self.say(num_found(result))
        else:
            self.say(num_found(result))
            self.say(body)

    def show_scrab_results(self, result: ResultSet) -> None:
        self.say(num_found(result))
        self.say("Words you can make with these letters:")
        self.say(wrap(", ".join(result.words)) + "\n")


class ProgressDots:
    """Progress hook for long Scrabble searches: one dot per finished candidate size."""

    def __init__(self, out: TextIO = sys.stdout) -> None:
        self._out = out
        self.started = False

    def __call__(self, size: int, total: int) -> None:
        if not self.started:
            self._out.write("Preparing permutations: ")
            self.started = True
        self._out.write(".")
        self._out.flush()

    def finish(self) -> None:
        if self.started:
            self._out.write("\n")
            self._out.flush()
