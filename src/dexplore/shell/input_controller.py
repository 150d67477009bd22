import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from dexplore.config import explorer_config
from dexplore.core.errors import InvalidPattern, QueryCancelled
from dexplore.core.query_engine import QueryEngine, Request
from dexplore.shell.results_display import ResultsDisplay

logger = logging.getLogger(__name__)

INTRO = """\
===============================
Welcome to Dictionary Explorer!

This app does two kinds of searches.

1. Word match search:
Type any sequence of letters, and get back words in the dictionary that match
that sequence (in that order). You can use regular expressions (Python syntax).

Example: search for 'berg'. Results:
10 found.
ambergris, berg, bergs, fiberglass, flabbergast, flabbergasted,
flabbergasting, flabbergasts, iceberg, icebergs

2. Scrabble search:
If you start your search with a forward slash (/) followed by some letters,
then you'll get back a list of words that use of those letters (in any order).

Example: search for '/asdf'. Results:
7 found.
Words you can make with these letters:
fads, ads, fad, sad, ad, as, fa

To search again, type '//' and press enter to accept the previous search.
To quit, type '/q' (without the quotation marks).
===============================
"""

PROMPT = "Input word or pattern: "
REPEAT_PROMPT = "enter to search again=>"
UP_ARROW = "\x1b[A"

Command = Enum("Command", ["EMPTY", "QUIT", "HELP", "REPEAT", "SCRAB", "PATTERN", "UNKNOWN"])

_HELP = re.compile(r"\A(h|\?|help)\Z", re.IGNORECASE)
_QUIT = re.compile(r"\A/?q\Z")
_REPEAT = re.compile(r"\A//")
_SCRAB = re.compile(r"\A/(\w+)\Z")


@dataclass(frozen=True)
class ParsedInput:
    command: Command
    value: str = ""


def parse_input(line: str) -> ParsedInput:
    """Decide what a line typed at the prompt asks for."""
    if not line:
        return ParsedInput(Command.EMPTY)
    if _QUIT.match(line):
        return ParsedInput(Command.QUIT)
    if _HELP.match(line):
        return ParsedInput(Command.HELP)
    if _REPEAT.match(line) or UP_ARROW in line:
        return ParsedInput(Command.REPEAT)
    scrab = _SCRAB.match(line)
    if scrab:
        return ParsedInput(Command.SCRAB, scrab.group(1))
    if line.startswith("/"):
        return ParsedInput(Command.UNKNOWN, line)
    return ParsedInput(Command.PATTERN, line)


class ExplorerShell:
    """Read-dispatch loop around a QueryEngine.

    The previous input is remembered here, not in the engine: repeating a
    search just dispatches that line again.
    """

    def __init__(
        self,
        engine: QueryEngine,
        display: Optional[ResultsDisplay] = None,
        input: Callable[[str], str] = input,
        max_letters: Optional[int] = explorer_config.MAX_SCRAB_LETTERS,
    ) -> None:
        self.engine = engine
        self.display = display or ResultsDisplay()
        self._input = input
        self._max_letters = max_letters
        self.last_input: Optional[str] = None

    def run(self) -> None:
        self.display.say(INTRO)
        while True:
            try:
                line = self._input(PROMPT).rstrip("\r\n")
            except (EOFError, KeyboardInterrupt):
                self.display.say("\nBye!")
                return
            if not self.handle_line(line):
                return

    def handle_line(self, line: str) -> bool:
        """Act on one line of input. Returns False when the user asked to quit."""
        parsed = parse_input(line)
        logger.debug(f"Dispatching {parsed.command.name} {parsed.value!r}")
        if parsed.command == Command.QUIT:
            self.display.say("Bye!")
            return False
        if parsed.command == Command.EMPTY:
            self.display.say("You searched for nothing, so we found nothing.")
        elif parsed.command == Command.HELP:
            self.display.say(INTRO)
        elif parsed.command == Command.REPEAT:
            return self._repeat()
        elif parsed.command == Command.UNKNOWN:
            self.display.say(f"Unknown command: {parsed.value} (type 'help' for help)")
        elif parsed.command == Command.SCRAB:
            self.last_input = line
            self._scrab(parsed.value)
        else:
            self.last_input = line
            self._pattern(parsed.value)
        return True

    def _repeat(self) -> bool:
        if self.last_input is None:
            self.display.say("Nothing to search again yet.")
            return True
        try:
            line = self._input(f"{REPEAT_PROMPT} |{self.last_input}| ").rstrip("\r\n")
        except (EOFError, KeyboardInterrupt):
            self.display.say("")
            return True
        return self.handle_line(line or self.last_input)

    def _pattern(self, pattern: str) -> None:
        try:
            result = self.engine.run(Request.pattern(pattern))
        except InvalidPattern as e:
            self.display.say(f"\n  That isn't a well-formed regular expression: {e.message}\n")
            return
        except KeyboardInterrupt:
            self.display.say("\nSearch cancelled.")
            return
        self.display.show_pattern_results(result)

    def _scrab(self, letters: str) -> None:
        if self._max_letters is not None and len(letters) > self._max_letters:
            self.display.say(f"Too many letters: {len(letters)} (limit is {self._max_letters}).")
            return
        dots = self.display.progress_dots()
        try:
            result = self.engine.run(Request.scrab(letters), progress=dots)
        except (KeyboardInterrupt, QueryCancelled):
            dots.finish()
            self.display.say("\nSearch cancelled.")
            return
        dots.finish()
        self.display.show_scrab_results(result)
