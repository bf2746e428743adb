"""Operator precedence table."""

from __future__ import annotations

# Higher binds tighter
PRECEDENCE = {
    "~": 4,
    "^": 3,
    "v": 2,
    "⊕": 2,
    "->": 1,
    "<->": 1,
}

# Prefix operators never pop an operator of equal precedence
RIGHT_ASSOCIATIVE = frozenset({"~"})


def get_precedence(operator: str) -> int:
    """Return the binding strength of an operator, 0 if unknown."""
    return PRECEDENCE.get(operator, 0)


def is_right_associative(operator: str) -> bool:
    return operator in RIGHT_ASSOCIATIVE
