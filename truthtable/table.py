# truthtable/table.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Row enumeration and truth table construction

"""Truth table construction from an analyzed formula.

Rows are indexed r = 0 .. 2^n - 1. The first collected variable is the
most significant bit of r, and a 0 bit means True, so the first row is all
True and the last row is all False.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Sequence, Tuple

from formula import Analysis, analyze, evaluate
from formula.ast_nodes import Expr
from utils.logger import get_logger


# Tables with more variables than this are built with a warning
LARGE_TABLE_VARIABLES = 10


@dataclass(frozen=True)
class Row:
    """One line of a truth table.

    Attributes:
        assignment: Truth value of every variable for this line
        values: Truth value of each table column, in column order
    """

    assignment: Mapping[str, bool]
    values: Tuple[bool, ...]


@dataclass(frozen=True)
class TruthTable:
    """Complete truth table of one formula.

    Attributes:
        tree: Root of the formula's expression tree
        variables: Variable names, leftmost columns
        columns: Compound sub-expressions shown after the variables
        rows: 2^n rows in enumeration order
    """

    tree: Expr
    variables: Tuple[str, ...]
    columns: Tuple[Expr, ...]
    rows: Tuple[Row, ...]

    @property
    def result(self) -> Tuple[bool, ...]:
        """Value of the whole formula in each row."""
        return tuple(evaluate(self.tree, row.assignment) for row in self.rows)


def enumerate_assignments(variables: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of the given variables in row order.

    Args:
        variables: Variable names; the first one is the most significant bit

    Yields:
        One mapping from name to truth value per row
    """
    n = len(variables)
    for r in range(2**n):
        yield {
            name: (r // 2 ** (n - 1 - c)) % 2 == 0
            for c, name in enumerate(variables)
        }


def build_table(analysis: Analysis) -> TruthTable:
    """Evaluate every sub-expression of an analyzed formula on every row."""
    logger = get_logger()

    if len(analysis.variables) > LARGE_TABLE_VARIABLES:
        logger.warning(
            f"Formula has {len(analysis.variables)} variables, "
            f"building {2 ** len(analysis.variables)} rows"
        )

    rows = tuple(
        Row(assignment, tuple(evaluate(e, assignment) for e in analysis.subexpressions))
        for assignment in enumerate_assignments(analysis.variables)
    )

    logger.table_built(
        str(analysis.tree), len(rows), len(analysis.variables) + len(analysis.subexpressions)
    )
    return TruthTable(analysis.tree, analysis.variables, analysis.subexpressions, rows)


def truth_table(source: str) -> TruthTable:
    """Analyze formula text and build its truth table.

    Raises:
        LexError: The text contains an unknown character
        ParseError: The formula is empty or malformed
    """
    return build_table(analyze(source))
