"""
Postfix Evaluator.

Reduces a postfix token sequence to a single truth value using a value stack.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from ..errors import ErrorKind, ExpressionError
from .tokenizer import Token, TokenKind, format_tokens

logger = logging.getLogger(__name__)


# Truth tables for the binary connectives; a is the left operand
BINARY_OPERATIONS: Dict[str, Callable[[bool, bool], bool]] = {
    "^": lambda a, b: a and b,
    "v": lambda a, b: a or b,
    "⊕": lambda a, b: a != b,
    "->": lambda a, b: (not a) or b,
    "<->": lambda a, b: a == b,
}


def format_result(value: bool) -> str:
    """Render a truth value as a literal."""
    return "1" if value else "0"


class PostfixEvaluator:
    """
    Evaluator for postfix logic expressions.

    Supports:
    - Literals: 0, 1
    - Unary: ~ (NOT)
    - Binary: ^ (AND), v (OR), ⊕ (XOR), -> (IMPLIES), <-> (BICONDITIONAL)
    """

    def evaluate(self, postfix: List[Token]) -> bool:
        """
        Evaluate postfix tokens.

        Args:
            postfix: Tokens in postfix order.

        Returns:
            The resulting truth value.

        Raises:
            ExpressionError: INSUFFICIENT_OPERANDS, UNKNOWN_OPERATOR or
                MALFORMED_EXPRESSION.
        """
        stack: List[bool] = []

        for token in postfix:
            if token.kind == TokenKind.LITERAL:
                stack.append(token.text == "1")

            elif token.kind == TokenKind.NOT:
                if len(stack) < 1:
                    raise ExpressionError(
                        ErrorKind.INSUFFICIENT_OPERANDS,
                        f"Insufficient operands for {token.text}",
                        token=token.text,
                    )
                stack.append(not stack.pop())

            else:
                if len(stack) < 2:
                    raise ExpressionError(
                        ErrorKind.INSUFFICIENT_OPERANDS,
                        f"Insufficient operands for {token.text}",
                        token=token.text,
                    )
                operation = BINARY_OPERATIONS.get(token.text)
                if operation is None:
                    raise ExpressionError(
                        ErrorKind.UNKNOWN_OPERATOR,
                        f"Unknown operator: {token.text}",
                        token=token.text,
                    )
                b = stack.pop()
                a = stack.pop()
                stack.append(operation(a, b))

        if len(stack) != 1:
            logger.debug(
                "Stack has %d values after evaluating: %s",
                len(stack), format_tokens(postfix),
            )
            raise ExpressionError(
                ErrorKind.MALFORMED_EXPRESSION,
                f"Expected one value after evaluation, found {len(stack)}",
            )

        return stack[0]

    def evaluate_to_literal(self, postfix: List[Token]) -> str:
        """Evaluate postfix tokens and render the result as ``"0"`` or ``"1"``."""
        return format_result(self.evaluate(postfix))


def evaluate_postfix(postfix: List[Token]) -> str:
    """Evaluate postfix tokens with the default connectives."""
    return PostfixEvaluator().evaluate_to_literal(postfix)
