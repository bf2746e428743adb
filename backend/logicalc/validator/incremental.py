"""
Incremental Input Validation.

Decides whether appending a candidate token keeps the expression on a path
to being well-formed. Rules are checked in order and the first forbidding
rule rejects the candidate:

1. An empty expression must start with 0, 1, ( or ~.
2. No operator may follow an operator.
3. A literal must be followed by a binary operator or ).
4. An opening parenthesis must be followed by 0, 1, ( or ~.
5. A closing parenthesis must be followed by ) or a binary operator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..logic.tokenizer import BINARY_OPERATORS, LITERALS, is_operator, last_token

# Tokens that may open an expression or a group
OPENING_TOKENS = ("0", "1", "(", "~")


@dataclass
class InputCheck:
    """Outcome of checking one candidate token."""

    accepted: bool
    rule: Optional[int] = None
    reason: str = ""

    def __bool__(self) -> bool:
        return self.accepted

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "accepted": self.accepted,
            "rule": self.rule,
            "reason": self.reason,
        }


class IncrementalValidator:
    """
    Validates the next token of an expression under construction.

    Multi-character operators (``->``, ``<->``) are validated as one atomic
    token, and a trailing ``->``/``<->`` in the expression counts as an
    operator. The validator never raises.
    """

    def check(self, expression: str, candidate: str) -> InputCheck:
        """
        Check a candidate token against the current expression.

        Args:
            expression: The accumulated expression.
            candidate: The token about to be appended.

        Returns:
            InputCheck with the rejecting rule, if any.
        """
        if expression == "":
            if candidate not in OPENING_TOKENS:
                return InputCheck(False, 1, "Expression must start with 0, 1, ( or ~")
            return InputCheck(True)

        last = last_token(expression)

        if is_operator(last) and is_operator(candidate):
            return InputCheck(False, 2, f"Operator '{candidate}' cannot follow operator '{last}'")

        if last in LITERALS and candidate not in BINARY_OPERATORS and candidate != ")":
            return InputCheck(False, 3, f"Literal must be followed by a binary operator or ), got '{candidate}'")

        if last == "(" and candidate not in OPENING_TOKENS:
            return InputCheck(False, 4, f"'{candidate}' cannot follow (")

        if last == ")" and candidate != ")" and candidate not in BINARY_OPERATORS:
            return InputCheck(False, 5, f"'{candidate}' cannot follow )")

        return InputCheck(True)

    def is_valid_input(self, expression: str, candidate: str) -> bool:
        """Return True if ``candidate`` may be appended to ``expression``."""
        return self.check(expression, candidate).accepted


def is_valid_input(expression: str, candidate: str) -> bool:
    """
    Convenience function to check a single candidate token.

    Args:
        expression: The accumulated expression.
        candidate: The token about to be appended.

    Returns:
        True if the candidate is accepted.
    """
    return IncrementalValidator().is_valid_input(expression, candidate)
