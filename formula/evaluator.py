# formula/evaluator.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Truth-value evaluation of expression trees under a variable assignment

"""Evaluation of propositional expression trees.

The evaluator is a pure function of the tree and the assignment: it keeps
no state between calls, so evaluating the same tree under the same
assignment always gives the same result.
"""

from __future__ import annotations
from typing import Mapping

from . import ast_nodes as ast
from .exceptions import EvaluationError


class Evaluator(ast.Visitor):
    """Computes the truth value of a tree for one assignment.

    Attributes:
        _assignment: Truth value of every variable the tree references
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return self._assignment[n.name]
        except KeyError:
            raise EvaluationError(n.name) from None

    def visit_negation(self, n: ast.Negation) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left or right

    def visit_condition(self, n: ast.Condition) -> bool:
        # Material implication: only T -> F is false
        left = n.left.accept(self)
        right = n.right.accept(self)
        return not (left and not right)

    def visit_equivalence(self, n: ast.Equivalence) -> bool:
        left = n.left.accept(self)
        right = n.right.accept(self)
        return left == right


def evaluate(expr: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate an expression under a complete variable assignment.

    Args:
        expr: Tree or sub-tree to evaluate
        assignment: Mapping from variable name to truth value

    Returns:
        Truth value of the expression

    Raises:
        EvaluationError: The expression references a variable missing from the assignment
    """
    return bool(expr.accept(Evaluator(assignment)))
