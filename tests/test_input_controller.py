#!/usr/bin/env python3

import unittest
from io import StringIO
from unittest.mock import Mock

from dexplore.core.errors import QueryCancelled
from dexplore.shell.input_controller import Command, ExplorerShell, ParsedInput, parse_input
from dexplore.shell.results_display import ResultsDisplay
from fixtures.dictionary_helpers import BERG_DICT, SCENARIO_DICT, create_test_engine


def scripted_input(lines):
    """Stand-in for input() that replays lines, then behaves like Ctrl-D."""
    prompts = []
    remaining = iter(lines)

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    fake_input.prompts = prompts
    return fake_input


class TestParseInput(unittest.TestCase):
    def test_commands(self):
        cases = {
            "": ParsedInput(Command.EMPTY),
            "q": ParsedInput(Command.QUIT),
            "/q": ParsedInput(Command.QUIT),
            "h": ParsedInput(Command.HELP),
            "?": ParsedInput(Command.HELP),
            "HELP": ParsedInput(Command.HELP),
            "//": ParsedInput(Command.REPEAT),
            "\x1b[A": ParsedInput(Command.REPEAT),
            "/asdf": ParsedInput(Command.SCRAB, "asdf"),
            "/as df": ParsedInput(Command.UNKNOWN, "/as df"),
            "berg": ParsedInput(Command.PATTERN, "berg"),
            "^q.*": ParsedInput(Command.PATTERN, "^q.*"),
            "qu": ParsedInput(Command.PATTERN, "qu"),
        }
        for line, expected in cases.items():
            self.assertEqual(expected, parse_input(line), repr(line))


class TestExplorerShell(unittest.TestCase):
    def setUp(self):
        self.out = StringIO()
        self.pager = Mock()
        self.display = ResultsDisplay(out=self.out, pager=self.pager)
        self.engine = create_test_engine(SCENARIO_DICT + BERG_DICT)

    def make_shell(self, lines=(), **kwargs):
        return ExplorerShell(self.engine, display=self.display, input=scripted_input(lines), **kwargs)

    def test_scrab_search(self):
        shell = self.make_shell()
        self.assertTrue(shell.handle_line("/asdf"))
        output = self.out.getvalue()
        self.assertIn("6 found.", output)
        self.assertIn("Words you can make with these letters:", output)
        self.assertIn("fads, ads, sad, ad, as, fa", output)

    def test_pattern_search(self):
        shell = self.make_shell()
        shell.handle_line("berg")
        self.assertIn("4 found.\nambergris, iceberg, bergs, berg\n", self.out.getvalue())

    def test_pattern_without_results(self):
        shell = self.make_shell()
        shell.handle_line("xyz")
        self.assertIn("No results found.", self.out.getvalue())

    def test_invalid_pattern_is_reported(self):
        shell = self.make_shell()
        self.assertTrue(shell.handle_line("(berg"))
        self.assertIn("That isn't a well-formed regular expression:", self.out.getvalue())

    def test_empty_input(self):
        shell = self.make_shell()
        shell.handle_line("")
        self.assertIn("You searched for nothing, so we found nothing.", self.out.getvalue())

    def test_quit(self):
        shell = self.make_shell()
        self.assertFalse(shell.handle_line("/q"))
        self.assertIn("Bye!", self.out.getvalue())

    def test_unknown_command(self):
        shell = self.make_shell()
        shell.handle_line("/a-b")
        self.assertIn("Unknown command: /a-b", self.out.getvalue())

    def test_repeat_without_previous_search(self):
        shell = self.make_shell()
        shell.handle_line("//")
        self.assertIn("Nothing to search again yet.", self.out.getvalue())

    def test_repeat_accepts_previous_search(self):
        shell = self.make_shell([""])
        shell.handle_line("/asdf")
        shell.handle_line("//")
        self.assertEqual(2, self.out.getvalue().count("6 found."))
        self.assertEqual(["enter to search again=> |/asdf| "], shell._input.prompts)

    def test_repeat_can_be_edited(self):
        shell = self.make_shell(["berg"])
        shell.handle_line("/asdf")
        shell.handle_line("\x1b[A")
        self.assertIn("4 found.", self.out.getvalue())
        self.assertEqual("berg", shell.last_input)

    def test_max_letters(self):
        shell = self.make_shell(max_letters=3)
        shell.handle_line("/asdf")
        self.assertIn("Too many letters: 4 (limit is 3).", self.out.getvalue())

    def test_cancelled_scrab_keeps_shell_running(self):
        engine = Mock()
        engine.run.side_effect = QueryCancelled("stop")
        shell = ExplorerShell(engine, display=self.display, input=scripted_input([]))
        self.assertTrue(shell.handle_line("/asdf"))
        self.assertIn("Search cancelled.", self.out.getvalue())

    def test_interrupted_scrab_keeps_shell_running(self):
        engine = Mock()
        engine.run.side_effect = KeyboardInterrupt
        shell = ExplorerShell(engine, display=self.display, input=scripted_input([]))
        self.assertTrue(shell.handle_line("/asdf"))
        self.assertIn("Search cancelled.", self.out.getvalue())

    def test_long_scrab_shows_progress(self):
        shell = self.make_shell()
        shell.handle_line("/abcdefghijk")
        self.assertIn("Preparing permutations: ...........\n", self.out.getvalue())

    def test_run_until_quit(self):
        shell = self.make_shell(["/asdf", "help", "q", "berg"])
        shell.run()
        output = self.out.getvalue()
        self.assertIn("Welcome to Dictionary Explorer!", output)
        self.assertIn("6 found.", output)
        self.assertTrue(output.rstrip().endswith("Bye!"))
        self.assertNotIn("4 found.", output)

    def test_run_keeps_surrounding_spaces_in_patterns(self):
        engine = create_test_engine(["ice berg", "iceberg"])
        shell = ExplorerShell(engine, display=self.display, input=scripted_input([" berg"]))
        shell.run()
        self.assertEqual(" berg", shell.last_input)
        self.assertIn("1 found.\nice berg\n", self.out.getvalue())

    def test_run_until_eof(self):
        shell = self.make_shell(["berg"])
        shell.run()
        self.assertIn("4 found.", self.out.getvalue())
        self.assertTrue(self.out.getvalue().rstrip().endswith("Bye!"))


if __name__ == '__main__':
    unittest.main()
