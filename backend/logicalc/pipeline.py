"""
Evaluation Pipeline.

Combines the completeness check, tokenizer, converter and evaluator into a
single call that turns an expression string into a result literal.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .errors import ErrorKind, ExpressionError
from .logic.converter import to_postfix
from .logic.evaluator import PostfixEvaluator
from .logic.tokenizer import tokenize
from .validator.completeness import CompletenessChecker

logger = logging.getLogger(__name__)


class LogicPipeline:
    """
    Evaluates complete logic expressions.

    Stages:
    - Completeness check (balanced groups, no dangling operator)
    - Tokenization
    - Infix-to-postfix conversion
    - Postfix evaluation
    """

    def __init__(self):
        self.checker = CompletenessChecker()
        self.evaluator = PostfixEvaluator()

    def evaluate(self, expression: str) -> str:
        """
        Evaluate an expression.

        Args:
            expression: The infix expression, e.g. ``"(1v0)^0"``.

        Returns:
            ``"1"`` or ``"0"``.

        Raises:
            ExpressionError: If any stage rejects the expression.
        """
        completeness = self.checker.validate(expression)
        if not completeness.valid:
            raise ExpressionError(
                ErrorKind.MALFORMED_EXPRESSION,
                completeness.first_message,
            )

        tokens = tokenize(expression)
        postfix = to_postfix(tokens)
        result = self.evaluator.evaluate_to_literal(postfix)
        logger.debug("Evaluated %r -> %s", expression, result)
        return result

    def validate(self, expression: str) -> Tuple[bool, Optional[str]]:
        """
        Check whether an expression evaluates without error.

        Returns:
            Tuple of (is_valid, error_message).
        """
        try:
            self.evaluate(expression)
            return True, None
        except ExpressionError as e:
            return False, str(e)


def evaluate_expression(expression: str) -> str:
    """Convenience function to evaluate a single expression."""
    return LogicPipeline().evaluate(expression)
