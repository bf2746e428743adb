"""
Expression Tokenizer.

Splits a raw expression string into lexical tokens, recognizing the
multi-character operators ``->`` and ``<->``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from ..errors import ErrorKind, ExpressionError


class TokenKind(Enum):
    """Lexical token categories."""

    LITERAL = "literal"
    NOT = "not"
    BINARY = "binary"
    LPAREN = "lparen"
    RPAREN = "rparen"


LITERALS = ("0", "1")
NOT_OPERATOR = "~"
BINARY_OPERATORS = ("^", "v", "⊕", "->", "<->")
OPERATORS = BINARY_OPERATORS + (NOT_OPERATOR,)

# Single-character tokens and their kinds
SINGLE_CHAR_TOKENS = {
    "0": TokenKind.LITERAL,
    "1": TokenKind.LITERAL,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "~": TokenKind.NOT,
    "^": TokenKind.BINARY,
    "v": TokenKind.BINARY,
    "⊕": TokenKind.BINARY,
}

# Multi-character operators, longest first
MULTI_CHAR_TOKENS = ("<->", "->")


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    kind: TokenKind
    text: str

    @property
    def is_operator(self) -> bool:
        return self.kind in (TokenKind.NOT, TokenKind.BINARY)

    def __str__(self) -> str:
        return self.text


def is_operator(text: str) -> bool:
    """Check whether a token string is a connective symbol."""
    return text in OPERATORS


def last_token(expression: str) -> str:
    """
    Return the last logical token of an expression string.

    A trailing ``->`` or ``<->`` is returned whole; otherwise the last
    character. Empty string for an empty expression.
    """
    for operator in MULTI_CHAR_TOKENS:
        if expression.endswith(operator):
            return operator
    return expression[-1:]


def tokenize(expression: str) -> List[Token]:
    """
    Tokenize an expression.

    Args:
        expression: The raw expression. Whitespace is ignored.

    Returns:
        The tokens in input order.

    Raises:
        ExpressionError: BAD_TOKEN on the first unrecognized character.
    """
    tokens: List[Token] = []
    i = 0

    while i < len(expression):
        char = expression[i]

        if char.isspace():
            i += 1
            continue

        for operator in MULTI_CHAR_TOKENS:
            if expression.startswith(operator, i):
                tokens.append(Token(TokenKind.BINARY, operator))
                i += len(operator)
                break
        else:
            kind = SINGLE_CHAR_TOKENS.get(char)
            if kind is None:
                raise ExpressionError(
                    ErrorKind.BAD_TOKEN,
                    f"Unexpected character '{char}'",
                    token=char,
                    position=i,
                )
            tokens.append(Token(kind, char))
            i += 1

    return tokens


def format_tokens(tokens: List[Token]) -> str:
    """Join tokens with spaces for display and logging."""
    return " ".join(t.text for t in tokens)
