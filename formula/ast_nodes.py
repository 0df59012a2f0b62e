# formula/ast_nodes.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct
tree representations of propositional formulas. A tree is built bottom-up
by the parser, never mutated afterwards, and every child is owned by
exactly one parent.

Node Types:
    Variable: Single uppercase letter naming a proposition
    Negation: Unary logical NOT
    And, Or, Condition, Equivalence: Binary connectives

All nodes support the visitor design pattern for traversal and evaluation,
and render back to the input syntax through ``render`` and ``str``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and evaluation.
    """

    def visit_variable(self, n: Variable): ...

    def visit_negation(self, n: Negation): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_condition(self, n: Condition): ...

    def visit_equivalence(self, n: Equivalence): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Concrete node types implement ``accept`` for visitor dispatch and
    ``render`` for conversion back to formula text.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def render(self, top_level: bool = True) -> str:
        """Return the formula text for this node.

        Compound operands are parenthesized whenever they are not the
        outermost expression, so the text parses back to the same tree.

        Args:
            top_level: Whether this node is the root of the rendered text

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Propositional variable, a leaf of the tree.

    Attributes:
        name: Single uppercase letter identifying the variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def render(self, top_level: bool = True) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Negation(Expr):
    """Logical negation of a single operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_negation(self)

    def render(self, top_level: bool = True) -> str:
        return f"-{self.operand.render(False)}"


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """Common shape of the two-operand connectives.

    Subclasses only declare their display symbol, their token kind name
    and their visitor hook.

    Attributes:
        left: Left operand, taken from the parser's working stack
        right: Right operand, parsed from the tokens that follow the operator
    """

    symbol: ClassVar[str] = "?"
    kind: ClassVar[str] = "Binary"

    left: Expr
    right: Expr

    def render(self, top_level: bool = True) -> str:
        text = f"{self.left.render(False)} {self.symbol} {self.right.render(False)}"
        return text if top_level else f"({text})"


@dataclass(frozen=True, slots=True)
class And(Binary):
    """Conjunction: true when both operands are true."""

    symbol: ClassVar[str] = "^"
    kind: ClassVar[str] = "And"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(Binary):
    """Disjunction: true when at least one operand is true."""

    symbol: ClassVar[str] = "v"
    kind: ClassVar[str] = "Or"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Condition(Binary):
    """Material implication ``left -> right``."""

    symbol: ClassVar[str] = "->"
    kind: ClassVar[str] = "Conditional"

    def accept(self, v: Visitor):
        return v.visit_condition(self)


@dataclass(frozen=True, slots=True)
class Equivalence(Binary):
    """Biconditional ``left <-> right``."""

    symbol: ClassVar[str] = "<->"
    kind: ClassVar[str] = "Equivalent"

    def accept(self, v: Visitor):
        return v.visit_equivalence(self)
