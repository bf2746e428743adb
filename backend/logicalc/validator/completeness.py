"""
Expression Completeness Validation.

Checks that a full expression is structurally complete before it is
evaluated:
- Parentheses are balanced and never close before they open
- The expression does not end in an operator or (
- There are no empty groups
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..logic.tokenizer import is_operator, last_token


@dataclass
class CompletenessIssue:
    """Represents a failed completeness check."""

    check: str
    message: str
    position: int = -1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "check": self.check,
            "message": self.message,
            "position": self.position,
        }


@dataclass
class CompletenessResult:
    """Result of completeness validation."""

    valid: bool
    issues: List[CompletenessIssue] = field(default_factory=list)

    def add_issue(self, check: str, message: str, position: int = -1) -> None:
        """Add an issue and mark the result invalid."""
        self.issues.append(CompletenessIssue(check, message, position))
        self.valid = False

    @property
    def first_message(self) -> str:
        return self.issues[0].message if self.issues else ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "valid": self.valid,
            "issues": [i.to_dict() for i in self.issues],
        }


class CompletenessChecker:
    """
    Validates that an expression is ready for evaluation.

    Passing is necessary but not sufficient: the converter and evaluator
    may still reject the expression.
    """

    def validate(self, expression: str) -> CompletenessResult:
        """
        Run all completeness checks.

        Args:
            expression: The full expression.

        Returns:
            CompletenessResult listing every failed check.
        """
        result = CompletenessResult(valid=True)

        self._check_parentheses(expression, result)
        self._check_ending(expression, result)
        self._check_empty_groups(expression, result)

        return result

    def is_complete(self, expression: str) -> bool:
        """Return True if the expression passes all checks."""
        return self.validate(expression).valid

    def _check_parentheses(self, expression: str, result: CompletenessResult) -> None:
        """Check parenthesis balance."""
        depth = 0
        for i, char in enumerate(expression):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
            if depth < 0:
                result.add_issue(
                    "parentheses",
                    "Closing parenthesis without matching opening",
                    position=i,
                )
                return

        if depth != 0:
            result.add_issue(
                "parentheses",
                f"Unbalanced parentheses: {depth} left open",
            )

    def _check_ending(self, expression: str, result: CompletenessResult) -> None:
        """Check that the expression does not dangle."""
        last = last_token(expression)
        if is_operator(last) or last == "(":
            result.add_issue(
                "ending",
                f"Expression cannot end with '{last}'",
                position=len(expression) - len(last),
            )

    def _check_empty_groups(self, expression: str, result: CompletenessResult) -> None:
        """Check for empty parentheses."""
        position = expression.find("()")
        if position != -1:
            result.add_issue("empty_group", "Empty parentheses", position=position)


def is_complete(expression: str) -> bool:
    """Convenience function to check an expression for completeness."""
    return CompletenessChecker().is_complete(expression)
