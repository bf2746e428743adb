"""
Tests for Logicalc validators.
"""

import pytest

from backend.logicalc.errors import ExpressionError
from backend.logicalc.logic import evaluate_postfix, to_postfix, tokenize
from backend.logicalc.validator import (
    CompletenessChecker,
    IncrementalValidator,
    is_complete,
    is_valid_input,
)

BINARY_OPERATORS = ["^", "v", "⊕", "->", "<->"]
INPUT_TOKENS = ["0", "1", "(", ")", "~", "^", "v", "->"]


def build_expressions(max_tokens):
    """Return every expression reachable through accepted inputs."""
    validator = IncrementalValidator()
    frontier = [""]
    reachable = []
    for _ in range(max_tokens):
        next_frontier = []
        for expression in frontier:
            for token in INPUT_TOKENS:
                if validator.is_valid_input(expression, token):
                    next_frontier.append(expression + token)
        reachable.extend(next_frontier)
        frontier = next_frontier
    return reachable


def evaluates(expression):
    """Return True if the expression evaluates without the completeness check."""
    try:
        evaluate_postfix(to_postfix(tokenize(expression)))
        return True
    except ExpressionError:
        return False


class TestIncrementalValidator:
    """Tests for IncrementalValidator."""

    @pytest.mark.parametrize("token", ["0", "1", "(", "~"])
    def test_valid_start(self, token):
        """Test tokens allowed at the start."""
        assert is_valid_input("", token) is True

    @pytest.mark.parametrize("token", BINARY_OPERATORS + [")"])
    def test_invalid_start(self, token):
        """Test that binary operators and ) cannot start an expression."""
        assert is_valid_input("", token) is False

    def test_consecutive_literals(self):
        """Test that a literal cannot follow a literal."""
        assert is_valid_input("1", "1") is False
        assert is_valid_input("1", "0") is False

    @pytest.mark.parametrize("previous", BINARY_OPERATORS)
    @pytest.mark.parametrize("candidate", BINARY_OPERATORS)
    def test_consecutive_binary_operators(self, previous, candidate):
        """Test that a binary operator cannot follow an operator."""
        assert is_valid_input("1" + previous, candidate) is False

    def test_negation_after_operator(self):
        """Test that ~ counts as an operator after another operator."""
        assert is_valid_input("1^", "~") is False
        assert is_valid_input("~", "~") is False

    def test_multi_character_operator_is_operator(self):
        """Test that a trailing -> or <-> blocks another operator."""
        validator = IncrementalValidator()
        check = validator.check("1<->", "^")
        assert check.accepted is False
        assert check.rule == 2
        assert validator.is_valid_input("1->", "0") is True

    def test_literal_followed_by(self):
        """Test what may follow a literal."""
        assert is_valid_input("1", "^") is True
        assert is_valid_input("1", "->") is True
        assert is_valid_input("(1", ")") is True
        assert is_valid_input("1", "(") is False
        assert is_valid_input("1", "~") is False

    def test_open_paren_followed_by(self):
        """Test what may follow (."""
        for token in ["0", "1", "(", "~"]:
            assert is_valid_input("(", token) is True
        for token in BINARY_OPERATORS + [")"]:
            assert is_valid_input("(", token) is False

    def test_close_paren_followed_by(self):
        """Test what may follow )."""
        assert is_valid_input("(1)", ")") is True
        assert is_valid_input("(1)", "^") is True
        assert is_valid_input("(1)", "1") is False
        assert is_valid_input("(1)", "(") is False
        assert is_valid_input("(1)", "~") is False

    def test_negation_after_operand(self):
        """Test that ~ cannot follow a literal or )."""
        validator = IncrementalValidator()
        assert validator.check("1", "~").rule == 3
        assert validator.check("0", "~").rule == 3
        assert validator.check("(1)", "~").rule == 5

    def test_check_reports_rule(self):
        """Test that rejections name their rule."""
        validator = IncrementalValidator()
        assert validator.check("", "^").rule == 1
        assert validator.check("1", "1").rule == 3
        assert validator.check("(", ")").rule == 4
        assert validator.check("(1)", "0").rule == 5

    def test_check_accepted(self):
        """Test an accepted check."""
        check = IncrementalValidator().check("1", "^")
        assert bool(check) is True
        assert check.rule is None
        assert check.to_dict() == {"accepted": True, "rule": None, "reason": ""}


class TestCompletenessChecker:
    """Tests for CompletenessChecker."""

    @pytest.mark.parametrize("expression", ["1", "1^0", "(1v0)^0", "~(1)", "1<->0", "((1))"])
    def test_complete(self, expression):
        """Test complete expressions."""
        assert is_complete(expression) is True

    def test_unbalanced(self):
        """Test unclosed parenthesis."""
        result = CompletenessChecker().validate("(1^1")
        assert result.valid is False
        assert result.issues[0].check == "parentheses"

    def test_leading_close(self):
        """Test close before open."""
        result = CompletenessChecker().validate(")1^0")
        assert result.valid is False
        assert result.issues[0].position == 0

    def test_close_then_open(self):
        """Test that balanced counts in the wrong order are rejected."""
        assert is_complete("1)^(0") is False

    @pytest.mark.parametrize("expression", ["1^", "1->", "1<->", "~", "1v("])
    def test_dangling(self, expression):
        """Test trailing operators and openers."""
        result = CompletenessChecker().validate(expression)
        assert result.valid is False
        assert any(i.check == "ending" for i in result.issues)

    def test_empty_group(self):
        """Test () anywhere."""
        assert is_complete("()") is False
        assert is_complete("1^()") is False
        result = CompletenessChecker().validate("1v(()^1)")
        assert any(i.check == "empty_group" for i in result.issues)

    def test_multiple_issues(self):
        """Test that all failed checks are reported."""
        result = CompletenessChecker().validate("(()^")
        checks = {i.check for i in result.issues}
        assert checks == {"parentheses", "ending", "empty_group"}
        assert result.to_dict()["valid"] is False


class TestValidatorConsistency:
    """Tests that the two validators agree."""

    def test_constructed_expressions_are_accepted(self):
        """Test that every buildable, evaluable expression is complete."""
        expressions = build_expressions(6)
        assert expressions
        for expression in expressions:
            if evaluates(expression):
                assert is_complete(expression), expression
