# tests/table_tests/test_session.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Test suite for the interactive read loop

"""Test suite for the interactive session and its reserved words."""

import io
import pytest
from truthtable.session import HELP_LINES, Session


def scripted(lines):
    """Build a reader that returns the given lines, then signals end of input."""
    feed = iter(lines)
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    reader.prompts = prompts
    return reader


class TestSession:
    """Test cases for session commands and error policy."""

    def setup_method(self):
        self.out = io.StringIO()

    def _lines(self):
        return self.out.getvalue().splitlines()

    def test_help_prints_legend(self):
        session = Session(reader=scripted(["help", "exit"]), out=self.out)

        assert session.run() == 0
        assert self._lines() == HELP_LINES

    def test_exit_stops_before_remaining_lines(self):
        session = Session(reader=scripted(["exit", "A ^ B"]), out=self.out)

        assert session.run() == 0
        assert self.out.getvalue() == ""

    def test_formula_prints_table(self):
        session = Session(reader=scripted(["  A -> B  "]), out=self.out)

        assert session.run() == 0
        assert self._lines()[:3] == [
            "| A | B | A -> B |",
            "------------------",
            "| T | T |    T   |",
        ]

    def test_prompt_is_shown_for_each_line(self):
        reader = scripted(["A", "", "B"])
        Session(reader=reader, out=self.out).run()

        assert reader.prompts == ["> "] * 4

    def test_blank_lines_are_ignored(self):
        session = Session(reader=scripted(["", "   ", "\t"]), out=self.out)

        assert session.run() == 0
        assert self._lines() == [""]

    def test_error_aborts_only_the_current_line(self):
        """A rejected formula prints no table and the loop continues."""
        session = Session(reader=scripted(["A & B", "A ^", "B"]), out=self.out)

        assert session.run() == 0
        assert session.failures == 2
        assert self._lines()[:2] == ["| B |", "-----"]

    def test_exit_on_error_stops_with_status_one(self):
        session = Session(
            reader=scripted(["A ^ (B", "A v B"]), out=self.out, exit_on_error=True
        )

        assert session.run() == 1
        assert self.out.getvalue() == ""

    @pytest.mark.parametrize("line", ["help", "exit", "", "A ^ B"])
    def test_handle_accepted_lines(self, line):
        """handle() reports a status only for exit."""
        session = Session(out=self.out)
        expected = 0 if line == "exit" else None

        assert session.handle(line) == expected

    def test_show_table_reports_rejection(self):
        session = Session(out=self.out)

        assert session.show_table("a") is False
        assert session.show_table("A") is True

    def test_run_lines(self):
        session = Session(out=self.out)

        assert session.run_lines(["A ^ B", "-A"]) == 0
        assert self._lines()[0] == "| A | B | A ^ B |"

    def test_run_lines_reports_failure(self):
        session = Session(out=self.out)

        assert session.run_lines(["A ^ B", "()", "-A"]) == 1
        assert "| A | -A |" in self._lines()

    def test_run_lines_exit_on_error(self):
        session = Session(out=self.out, exit_on_error=True)

        assert session.run_lines(["()", "A"]) == 1
        assert self.out.getvalue() == ""

    def test_deep_nesting_aborts_only_the_line(self):
        """A formula nested past the parser's limit is rejected and the loop goes on."""
        session = Session(reader=scripted(["-" * 600 + "A", "A"]), out=self.out)

        assert session.handle("-" * 600 + "A") is None
        assert session.failures == 1
        assert self.out.getvalue() == ""

        assert session.run() == 0
        assert session.failures == 2
        assert self._lines()[:2] == ["| A |", "-----"]

    def test_moderate_nesting_prints_table(self):
        session = Session(out=self.out)

        assert session.show_table("-" * 100 + "A") is True
        assert self._lines()[2].startswith("| T |")
