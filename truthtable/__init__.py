# truthtable/__init__.py
# This file is part of Tabula - A Propositional Truth Table Evaluator

"""Truth table driver.

This package provides:
  • enumerate_assignments: all variable assignments in row order
  • truth_table / build_table: evaluated TruthTable for a formula
  • render_table: text grid with T/F cells
  • Session: interactive read loop with help and exit commands
"""

from .table import Row, TruthTable, build_table, enumerate_assignments, truth_table
from .renderer import render_table
from .session import HELP_LINES, Session

__all__ = [
    "Row",
    "TruthTable",
    "build_table",
    "enumerate_assignments",
    "truth_table",
    "render_table",
    "HELP_LINES",
    "Session",
]
