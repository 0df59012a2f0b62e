# tests/logic_tests/test_collectors.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Test suite for variable and sub-expression collection

"""Test suite for the tree walks that produce truth table columns."""

import pytest
from formula import analyze, parse
from formula.ast_nodes import Variable, Negation, And, Or, Condition
from formula.collectors import collect_inductive, collect_variables


A, B, C = Variable("A"), Variable("B"), Variable("C")


class TestVariableCollector:
    """Test cases for first-appearance variable ordering."""

    VARIABLE_CASES = [
        ("A", ("A",)),
        ("A -> B", ("A", "B")),
        ("B -> A", ("B", "A")),
        ("A ^ A", ("A",)),
        ("-C v (A ^ C) -> B", ("C", "A", "B")),
        ("(Z v Y) ^ (X v Z)", ("Z", "Y", "X")),
        ("--Q", ("Q",)),
    ]

    @pytest.mark.parametrize("formula, expected", VARIABLE_CASES)
    def test_variable_order(self, formula, expected):
        """Variables are listed once each, in order of first appearance.

        Args:
            formula: Formula text
            expected: Expected variable names in order
        """
        assert collect_variables(parse(formula)) == expected


class TestInductiveCollector:
    """Test cases for sub-expression column ordering."""

    def test_variable_only_has_no_columns(self):
        """A bare variable contributes no sub-expression column."""
        assert collect_inductive(parse("A")) == ()

    def test_negation_before_enclosing_and(self):
        """'-A ^ B' lists the negation first, then the conjunction."""
        assert collect_inductive(parse("-A ^ B")) == (
            Negation(A),
            And(Negation(A), B),
        )

    def test_left_subtree_before_right(self):
        """Compound operands appear left to right before their parent."""
        tree = parse("(A v B) -> (B ^ C)")
        assert collect_inductive(tree) == (
            Or(A, B),
            And(B, C),
            Condition(Or(A, B), And(B, C)),
        )

    def test_right_chain_is_post_order(self):
        """Right-nested chains list the innermost operator first."""
        assert [str(e) for e in collect_inductive(parse("A ^ B ^ C"))] == [
            "B ^ C",
            "A ^ (B ^ C)",
        ]

    def test_mixed_chain_is_post_order(self):
        """A change of operator lists the earlier operator first."""
        assert [str(e) for e in collect_inductive(parse("A ^ B v C"))] == [
            "A ^ B",
            "(A ^ B) v C",
        ]

    def test_negated_compound_lists_operand_first(self):
        """A negated compound is preceded by the compound it negates."""
        assert collect_inductive(parse("-(A ^ B)")) == (
            And(A, B),
            Negation(And(A, B)),
        )

    def test_double_negation(self):
        """Each negation layer is its own column, innermost first."""
        assert collect_inductive(parse("--A")) == (
            Negation(A),
            Negation(Negation(A)),
        )

    def test_repeated_sub_expression_is_listed_per_occurrence(self):
        """Equal sub-trees in different positions each get a column."""
        columns = collect_inductive(parse("(A ^ B) v (A ^ B)"))
        assert [str(e) for e in columns] == ["A ^ B", "A ^ B", "(A ^ B) v (A ^ B)"]

    def test_root_is_last_column(self):
        """The whole formula is always the final column."""
        result = analyze("-(A v B) <-> (-A ^ -B)")

        assert result.subexpressions[-1] == result.tree
        assert [str(e) for e in result.subexpressions] == [
            "A v B",
            "-(A v B)",
            "-A",
            "-B",
            "-A ^ -B",
            "-(A v B) <-> (-A ^ -B)",
        ]


class TestAnalyze:
    """Test cases for the combined analysis entry point."""

    def test_analysis_triple(self, conditional_formula):
        """analyze() returns tree, variables and sub-expressions together."""
        result = analyze(conditional_formula)

        assert result.tree == Condition(A, B)
        assert result.variables == ("A", "B")
        assert result.subexpressions == (Condition(A, B),)

    def test_complex_formula_variables(self, complex_formula):
        """Variables of a formula mixing every connective."""
        assert analyze(complex_formula).variables == ("A", "B", "C")
