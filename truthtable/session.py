# truthtable/session.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Interactive read loop printing truth tables for entered formulas

"""Interactive session: one formula per line, one table per formula.

Two reserved words bypass the formula core: ``help`` prints the operator
legend and ``exit`` ends the session. A formula that fails to tokenize or
parse produces an error message and no table; the session then waits for
the next line unless it was created with ``exit_on_error``.
"""

from __future__ import annotations
import sys
from typing import Callable, Iterable, Optional, TextIO

from formula.exceptions import FormulaError
from utils.logger import get_logger
from .renderer import render_table
from .table import truth_table


HELP_LINES = [
    " ",
    " -------- Help ---------",
    "  Negate          -",
    "  And             ^",
    "  Or              v",
    "  Conditional     ->",
    "  Equivalent      <->",
    "",
]


class Session:
    """Line-oriented truth table session.

    Attributes:
        PROMPT: Text shown before each line is read
        exit_on_error: Stop with status 1 at the first rejected formula
        failures: Number of formulas rejected so far
    """

    PROMPT = "> "

    def __init__(
        self,
        reader: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
        exit_on_error: bool = False,
    ):
        self._reader = reader if reader is not None else input
        self._out = out if out is not None else sys.stdout
        self.exit_on_error = exit_on_error
        self.failures = 0

    def _write(self, line: str) -> None:
        print(line, file=self._out)

    def print_help(self) -> None:
        for line in HELP_LINES:
            self._write(line)

    def show_table(self, source: str) -> bool:
        """Print the truth table of a formula.

        Args:
            source: Formula text

        Returns:
            True if the table was printed, False if the formula was rejected
        """
        logger = get_logger()

        try:
            lines = render_table(truth_table(source))
        except FormulaError as e:
            logger.formula_rejected(source, str(e))
            self.failures += 1
            return False

        for line in lines:
            self._write(line)
        return True

    def handle(self, line: str) -> Optional[int]:
        """Process one input line.

        Returns:
            Exit status when the session should stop, otherwise None
        """
        content = line.strip()

        if not content:
            return None

        if content == "help":
            self.print_help()
            return None

        if content == "exit":
            return 0

        if not self.show_table(content) and self.exit_on_error:
            return 1

        return None

    def run_lines(self, lines: Iterable[str]) -> int:
        """Process pre-supplied lines without prompting.

        Returns:
            0 when every formula produced a table, 1 otherwise
        """
        for line in lines:
            status = self.handle(line)
            if status is not None:
                return status or (1 if self.failures else 0)
        return 1 if self.failures else 0

    def run(self) -> int:
        """Prompt for lines until ``exit`` or end of input.

        Returns:
            Process exit status
        """
        get_logger().info("Type 'help' for the operator legend, 'exit' to quit.")

        while True:
            try:
                line = self._reader(self.PROMPT)
            except EOFError:
                self._write("")
                return 0

            status = self.handle(line)
            if status is not None:
                return status
