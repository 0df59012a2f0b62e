# formula/lexer.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional formulas, breaking
input strings into typed tokens for parser consumption. Patterns are tried
in the order they are declared, so the three-character biconditional is
recognized before the conditional, and both before a lone negation sign.

Supported Tokens:
- Operators: - (negate), ^ (and), v or V (or), -> (conditional), <-> (equivalent)
- Grouping: ( and )
- Variables: a single uppercase letter A-Z (V excepted, it is the OR operator)
- Whitespace: ignored during tokenization

Lowercase letters other than v are rejected, even though v itself is
accepted in either case.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from sly import Lexer
from utils.logger import get_logger
from .exceptions import LexError


class TokenKind(Enum):
    """Closed set of token categories produced by the tokenizer."""

    VARIABLE = "Variable"
    NEGATE = "Negate"
    OR = "Or"
    AND = "And"
    EQUIVALENT = "Equivalent"
    CONDITIONAL = "Conditional"
    LPAREN = "LeftParen"
    RPAREN = "RightParen"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable token handed from the tokenizer to the parser.

    Attributes:
        kind: Category of the token
        raw: Source text the token was formed from (empty for EOF)
        index: Position of the first character in the source text
    """

    kind: TokenKind
    raw: str
    index: int = field(default=-1, compare=False)

    def __str__(self) -> str:
        return f"{self.kind}({self.raw})" if self.raw else str(self.kind)


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Token type names match the TokenKind member names so that SLY tokens
    convert directly into Token instances.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "EQUIVALENT",
        "CONDITIONAL",
        "NEGATE",
        "OR",
        "AND",
        "VARIABLE",
        "LPAREN",
        "RPAREN",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"

    # Declaration order is match order
    EQUIVALENT = r"<->"
    CONDITIONAL = r"->"
    NEGATE = r"-"
    OR = r"[vV]"
    AND = r"\^"
    VARIABLE = r"[A-Z]"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle unknown characters during tokenization.

        Args:
            t: SLY token object whose value starts at the unknown character

        Raises:
            LexError: Always raised with the character and its position
        """
        logger = get_logger()

        unknown_char = t.value[0]
        logger.debug(f"Unknown character '{unknown_char}' at position {self.index}")

        raise LexError(unknown_char, self.index)


def tokenize(text: str) -> List[Token]:
    """Convert formula text into a token list terminated by an EOF token.

    Args:
        text: Raw formula text

    Returns:
        Tokens in source order; the last one is always EOF with empty raw text

    Raises:
        LexError: The text contains a character outside the formula alphabet
    """
    result = [
        Token(TokenKind[tok.type], tok.value, tok.index)
        for tok in FormulaLexer().tokenize(text)
    ]
    result.append(Token(TokenKind.EOF, "", len(text)))

    get_logger().debug(f"Tokens: {[str(t) for t in result]}")
    return result
