# formula/grammar.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Stack-based reduction parser for propositional formulas

"""Stack-based parser building expression trees from token sequences.

The parser does not use operator precedence. Instead it keeps a working
stack of already built expressions:

- An operand (variable, negation, parenthesized group) is built and pushed.
- A binary operator pops the most recent expression as its LEFT operand and
  parses what follows as its RIGHT operand. The right operand keeps taking
  in operators of the same kind, and stops at an operator of another kind.

Consequences of this scheme:
- A chain of one operator nests to the right: ``A ^ B ^ C`` is
  ``A ^ (B ^ C)``.
- When the operator changes, the later operator takes everything built so
  far as its left operand: ``A ^ B v C`` is ``(A ^ B) v C``.
- Negation binds only the operand right after it: ``-A ^ B`` is ``(-A) ^ B``.

Each parenthesis group and each right-hand chain owns its own working
stack, so an operator can never take its left operand from outside the
group it appears in.
"""

from __future__ import annotations
import sys
from typing import Dict, List, Sequence, Type

from .ast_nodes import Expr, Variable, Negation, Binary, And, Or, Condition, Equivalence
from .lexer import Token, TokenKind
from .exceptions import ParseError
from utils.logger import get_logger


# Binary operator tokens and the nodes they build
_BINARY_NODES: Dict[TokenKind, Type[Binary]] = {
    TokenKind.AND: And,
    TokenKind.OR: Or,
    TokenKind.CONDITIONAL: Condition,
    TokenKind.EQUIVALENT: Equivalence,
}


def max_nesting_depth() -> int:
    """Deepest expression nesting accepted by the parser.

    Tree walks spend two frames per level (``accept`` and ``visit_*``), so
    trees are kept well below a quarter of the interpreter's recursion limit.
    """
    return sys.getrecursionlimit() // 4


class _FormulaParser:
    """Single-use parser over one token sequence.

    Attributes:
        _tokens: Tokens being parsed, always ending with EOF
        _pos: Index of the next unconsumed token
        _depth: Current nesting of ``_parse_expr`` calls
        _max_depth: Nesting at which parsing is abandoned
    """

    def __init__(self, tokens: Sequence[Token]):
        self._tokens: List[Token] = list(tokens)
        if not self._tokens or self._tokens[-1].kind is not TokenKind.EOF:
            self._tokens.append(Token(TokenKind.EOF, ""))
        self._pos = 0
        self._depth = 0
        self._max_depth = max_nesting_depth()

    @property
    def _current(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.kind is not TokenKind.EOF:
            self._pos += 1
        return token

    def parse(self) -> Expr:
        """Reduce the whole token sequence to a single expression.

        Returns:
            Root of the expression tree

        Raises:
            ParseError: Input is empty or does not reduce to exactly one expression
        """
        stack: List[Expr] = []

        while self._current.kind is not TokenKind.EOF:
            stack.append(self._parse_expr(stack))

        if not stack:
            raise ParseError("Input formula is empty.", self._current)

        if len(stack) > 1:
            raise ParseError(
                f"Expected a single expression, found {len(stack)}: "
                + ", ".join(str(e) for e in stack)
            )

        return stack[0]

    def _parse_expr(self, stack: List[Expr]) -> Expr:
        """Parse one expression starting at the current token.

        Args:
            stack: Working stack binary operators take their left operand from

        Returns:
            The expression built from the consumed tokens
        """
        token = self._current

        self._depth += 1
        try:
            if self._depth > self._max_depth:
                raise ParseError("Formula is nested too deeply", token)

            if token.kind is TokenKind.NEGATE:
                self._advance()
                return Negation(self._parse_expr([]))

            if token.kind is TokenKind.VARIABLE:
                self._advance()
                return Variable(token.raw)

            if token.kind in _BINARY_NODES:
                self._advance()
                if not stack:
                    raise ParseError(f"Missing left operand for {token.kind}", token)
                left = stack.pop()
                right = self._parse_chain(token.kind)
                return _BINARY_NODES[token.kind](left, right)

            if token.kind is TokenKind.LPAREN:
                return self._parse_group()

            raise ParseError(f"Unexpected token {token.kind}", token)
        finally:
            self._depth -= 1

    def _parse_chain(self, kind: TokenKind) -> Expr:
        """Parse the right operand of a binary operator of the given kind.

        Further operators of the same kind are absorbed, so a chain of one
        operator nests to the right. An operator of another kind ends the
        operand and is left for the enclosing stack.
        """
        stack: List[Expr] = []
        operand = self._parse_expr(stack)

        while self._current.kind is kind:
            stack.append(operand)
            operand = self._parse_expr(stack)

        return operand

    def _parse_group(self) -> Expr:
        """Parse a parenthesized group into the single expression it holds."""
        opening = self._advance()
        stack: List[Expr] = []

        while self._current.kind not in (TokenKind.RPAREN, TokenKind.EOF):
            stack.append(self._parse_expr(stack))

        if self._current.kind is TokenKind.EOF:
            raise ParseError("Unterminated parenthesis group", opening)
        self._advance()

        if not stack:
            raise ParseError("Empty parenthesis group", opening)

        if len(stack) > 1:
            raise ParseError(
                f"Parenthesis group holds {len(stack)} expressions instead of one",
                opening,
            )

        return stack[0]


def parse_tokens(tokens: Sequence[Token]) -> Expr:
    """Build an expression tree from a token sequence.

    Args:
        tokens: Tokens as produced by ``formula.lexer.tokenize``

    Returns:
        Root of the expression tree

    Raises:
        ParseError: The tokens do not form exactly one well-formed expression
    """
    logger = get_logger()

    result = _FormulaParser(tokens).parse()

    logger.debug(f"Successfully parsed formula into {type(result).__name__}: {result}")
    return result
