# formula/__init__.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Formula tokenization, parsing and analysis components

"""Propositional formula parsing and analysis.

This package turns formula text into an expression tree and extracts what a
truth table needs from it: the variables, in the order they define the
table's leftmost columns, and the compound sub-expressions, in the order
they are displayed.

Core Functions:
    tokenize: Converts formula text into a token list ending with EOF
    parse: Builds an expression tree from text or tokens
    analyze: Complete pipeline returning tree, variables and sub-expressions
    evaluate: Computes the truth value of a tree under an assignment

Supported Logic:
    - Variables: single uppercase letters
    - Negation (-), conjunction (^), disjunction (v)
    - Conditional (->) and biconditional (<->)
    - Parenthetical grouping

Grammar Features:
    - A chain of one binary operator nests to the right; a change of
      operator wraps everything parsed so far as the new left operand
    - Negation applies to the operand immediately after it

Example:
    >>> from formula import analyze
    >>> result = analyze("-A ^ B")
    >>> [str(e) for e in result.subexpressions]
    ['-A', '-A ^ B']
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .ast_nodes import Expr
from .collectors import collect_inductive, collect_variables
from .evaluator import evaluate
from .exceptions import EvaluationError, FormulaError, LexError, ParseError
from .grammar import parse_tokens
from .lexer import Token, TokenKind, tokenize
from utils.logger import get_logger


@dataclass(frozen=True)
class Analysis:
    """Result of analyzing one formula.

    Attributes:
        tree: Root of the expression tree
        variables: Distinct variable names in first-appearance order
        subexpressions: Non-variable nodes in display (post-) order
    """

    tree: Expr
    variables: Tuple[str, ...]
    subexpressions: Tuple[Expr, ...]


def parse(source: Union[str, Sequence[Token]]) -> Expr:
    """Parse formula text or a token sequence into an expression tree.

    Args:
        source: Formula text, or tokens produced by ``tokenize``

    Returns:
        Root node of the parsed formula

    Raises:
        LexError: The text contains an unknown character
        ParseError: The formula is empty or malformed

    Example:
        >>> parse("(A v B) ^ C")
        And(left=Or(left=Variable(name='A'), right=Variable(name='B')), right=Variable(name='C'))
    """
    logger = get_logger()

    tokens = tokenize(source) if isinstance(source, str) else source

    try:
        return parse_tokens(tokens)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except RecursionError as exc:
        raise ParseError("Formula is nested too deeply") from exc

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def analyze(source: str) -> Analysis:
    """Parse a formula and collect the columns of its truth table.

    Args:
        source: Formula text

    Returns:
        Analysis holding the tree, its variables and its sub-expressions

    Raises:
        LexError: The text contains an unknown character
        ParseError: The formula is empty or malformed
    """
    logger = get_logger()
    logger.debug(f"Analyzing formula: {source}")

    tree = parse(source)

    try:
        variables = collect_variables(tree)
        subexpressions = collect_inductive(tree)
    except RecursionError as exc:
        raise ParseError("Formula is nested too deeply") from exc

    logger.debug(
        f"Collected {len(variables)} variables and "
        f"{len(subexpressions)} sub-expressions"
    )
    return Analysis(tree, variables, subexpressions)


__all__ = [
    "Analysis",
    "Token",
    "TokenKind",
    "tokenize",
    "parse",
    "analyze",
    "evaluate",
    "FormulaError",
    "LexError",
    "ParseError",
    "EvaluationError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and analysis components"
