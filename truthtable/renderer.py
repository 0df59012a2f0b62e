# truthtable/renderer.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Text grid rendering of truth tables

"""Text rendering of truth tables.

Example for ``A -> B``::

    | A | B | A -> B |
    ------------------
    | T | T |    T   |
    | T | F |    F   |
    | F | T |    T   |
    | F | F |    T   |
"""

from __future__ import annotations
from typing import List, Sequence

from .table import Row, TruthTable


def cell(value: bool) -> str:
    """Return the single-character display form of a truth value."""
    return "T" if value else "F"


def render_header(table: TruthTable) -> str:
    """Return the header line: variable names, then each column's formula text."""
    head = "|" + " |".join(f" {name}" for name in table.variables) + " |"
    if table.columns:
        head += " |".join(f" {expr}" for expr in table.columns) + " |"
    return head


def render_row(table: TruthTable, row: Row, widths: Sequence[int]) -> str:
    """Return the grid line of one row.

    Args:
        table: Table the row belongs to
        row: Row to render
        widths: Length of each sub-expression column's header text

    Returns:
        Line with each T/F cell centred under its header
    """
    line = "|" + " |".join(f" {cell(row.assignment[name])}" for name in table.variables) + " |"
    if table.columns:
        cells = []
        for width, value in zip(widths, row.values):
            half = (width + 1) // 2
            left = half + (1 if width % 2 == 0 else 0)
            cells.append(" " * left + cell(value) + " " * half)
        line += "|".join(cells) + "|"
    return line


def render_table(table: TruthTable) -> List[str]:
    """Render a truth table as lines of text: header, rule, then one line per row."""
    head = render_header(table)
    widths = [len(str(expr)) for expr in table.columns]

    lines = [head, "-" * len(head)]
    lines.extend(render_row(table, row, widths) for row in table.rows)
    return lines
