"""
Evaluation errors.

All failures raised by the tokenizer, converter, evaluator and completeness
check share one exception type tagged with an error kind.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Kinds of evaluation failure."""

    BAD_TOKEN = "bad_token"
    MISMATCHED_PARENTHESIS = "mismatched_parenthesis"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    UNKNOWN_OPERATOR = "unknown_operator"
    MALFORMED_EXPRESSION = "malformed_expression"


class ExpressionError(ValueError):
    """
    Raised when an expression cannot be evaluated.

    Attributes:
        kind: The error kind.
        message: Human readable description.
        token: The offending token text, if any.
        position: Character offset in the expression, if known.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        token: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.token = token
        self.position = position

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.message} (at position {self.position})"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "token": self.token,
            "position": self.position,
        }
