# formula/collectors.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Tree walks collecting variables and displayable sub-expressions

"""Visitors that gather the columns of a truth table from an expression tree.

VariableCollector walks the tree in pre-order and records each variable
name the first time it is seen. The resulting order fixes the leftmost
table columns and the bit each variable occupies in the row index.

InductiveCollector walks the tree in post-order and records every node
that is not a bare variable. A node is recorded only after all of its
compound descendants, left subtree before right subtree, so that each
column's operands appear to its left.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from . import ast_nodes as ast


class VariableCollector(ast.Visitor):
    """Collects distinct variable names in order of first appearance.

    Attributes:
        _seen: Insertion-ordered mapping used as an ordered set
    """

    def __init__(self):
        self._seen: Dict[str, None] = {}

    def collect(self, root: ast.Expr) -> Tuple[str, ...]:
        root.accept(self)
        return tuple(self._seen)

    def visit_variable(self, n: ast.Variable):
        self._seen.setdefault(n.name)

    def visit_negation(self, n: ast.Negation):
        n.operand.accept(self)

    def _visit_binary(self, n: ast.Binary):
        n.left.accept(self)
        n.right.accept(self)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_condition = _visit_binary
    visit_equivalence = _visit_binary


class InductiveCollector(ast.Visitor):
    """Collects every non-variable node in post-order.

    Attributes:
        _found: Nodes recorded so far, in column order
    """

    def __init__(self):
        self._found: List[ast.Expr] = []

    def collect(self, root: ast.Expr) -> Tuple[ast.Expr, ...]:
        root.accept(self)
        return tuple(self._found)

    def visit_variable(self, n: ast.Variable):
        pass

    def visit_negation(self, n: ast.Negation):
        n.operand.accept(self)
        self._found.append(n)

    def _visit_binary(self, n: ast.Binary):
        n.left.accept(self)
        n.right.accept(self)
        self._found.append(n)

    visit_and = _visit_binary
    visit_or = _visit_binary
    visit_condition = _visit_binary
    visit_equivalence = _visit_binary


def collect_variables(root: ast.Expr) -> Tuple[str, ...]:
    """Return the distinct variable names of a tree in first-appearance order."""
    return VariableCollector().collect(root)


def collect_inductive(root: ast.Expr) -> Tuple[ast.Expr, ...]:
    """Return the non-variable sub-expressions of a tree in post-order."""
    return InductiveCollector().collect(root)
