# formula/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Custom exceptions for formula tokenization, parsing and evaluation

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while turning formula text into
an expression tree and while evaluating that tree. All of them derive from
FormulaError so that callers handling a single input line can catch one
type and move on to the next line.
"""

from typing import Optional


class FormulaError(RuntimeError):
    """Base class for every error raised by the formula core."""

    pass


class LexError(FormulaError):
    """Exception raised when the tokenizer meets a character it does not know.

    Attributes:
        char: The offending character
        position: Zero-based index of the character in the source text
    """

    def __init__(self, char: str, position: int):
        super().__init__(f"Unknown token {char}")
        self.char = char
        self.position = position


class ParseError(FormulaError):
    """Exception raised when a token sequence does not form a single expression.

    Covers operators without a left operand, tokens found where an operand
    was expected, and parenthesis groups that are empty, unterminated or do
    not reduce to one expression.

    Attributes:
        token: Token at which parsing failed, if there is one
    """

    def __init__(self, message: str, token: Optional[object] = None):
        super().__init__(message)
        self.token = token


class EvaluationError(FormulaError):
    """Exception raised when an assignment does not cover a referenced variable."""

    def __init__(self, name: str):
        super().__init__(f"Variable {name} has no truth value in the assignment")
        self.name = name
