"""
Infix-to-Postfix Converter.

Shunting-yard conversion of an infix token sequence into postfix order.
"""

from __future__ import annotations

import logging
from typing import List

from ..errors import ErrorKind, ExpressionError
from .precedence import get_precedence, is_right_associative
from .tokenizer import Token, TokenKind, format_tokens

logger = logging.getLogger(__name__)


def _should_pop(top: Token, incoming: Token) -> bool:
    """Decide whether the stack top leaves before the incoming operator."""
    if top.kind == TokenKind.LPAREN:
        return False
    top_prec = get_precedence(top.text)
    incoming_prec = get_precedence(incoming.text)
    if is_right_associative(incoming.text):
        return top_prec > incoming_prec
    return top_prec >= incoming_prec


def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Convert infix tokens to postfix.

    Binary operators are left-associative; ``~`` is a right-associative
    prefix operator, so ``~~1`` becomes ``1 ~ ~``.

    Args:
        tokens: Infix tokens from the tokenizer.

    Returns:
        Tokens in postfix order.

    Raises:
        ExpressionError: MISMATCHED_PARENTHESIS on unbalanced grouping.
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if token.kind == TokenKind.LITERAL:
            output.append(token)
        elif token.kind == TokenKind.LPAREN:
            stack.append(token)
        elif token.kind == TokenKind.RPAREN:
            while stack and stack[-1].kind != TokenKind.LPAREN:
                output.append(stack.pop())
            if not stack:
                raise ExpressionError(
                    ErrorKind.MISMATCHED_PARENTHESIS,
                    "Closing parenthesis without matching opening",
                    token=token.text,
                )
            stack.pop()
        else:
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

    while stack:
        operator = stack.pop()
        if operator.kind in (TokenKind.LPAREN, TokenKind.RPAREN):
            raise ExpressionError(
                ErrorKind.MISMATCHED_PARENTHESIS,
                "Unbalanced parentheses",
                token=operator.text,
            )
        output.append(operator)

    logger.debug("Postfix: %s", format_tokens(output))
    return output
