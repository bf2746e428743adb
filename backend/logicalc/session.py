"""
Calculator Session.

Owns the expression under construction and orchestrates validation and
evaluation in response to discrete actions (append, delete, clear, evaluate).
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .errors import ExpressionError
from .logic.tokenizer import LITERALS, MULTI_CHAR_TOKENS
from .models import CalculatorConfig, Connective, ControlAction, SessionState
from .pipeline import LogicPipeline
from .validator.incremental import IncrementalValidator

logger = logging.getLogger(__name__)

Renderer = Callable[[str], None]

# Tokens an action may append
INPUT_TOKENS = frozenset(LITERALS + ("(", ")") + tuple(c.symbol for c in Connective))


class LogicCalculator:
    """
    Interactive logic calculator.

    Each instance owns one expression and reports every state change to the
    injected ``render`` callable.

    States:
    - EMPTY: nothing entered
    - BUILDING: a partial expression
    - SETTLED: holds the "0"/"1" result of the last evaluation
    - ERRORED: evaluation failed; immediately reset to EMPTY
    """

    def __init__(
        self,
        render: Optional[Renderer] = None,
        config: Optional[CalculatorConfig] = None,
    ):
        """
        Initialize the calculator.

        Args:
            render: Callable receiving the text to display.
            config: Calculator configuration; defaults are used if omitted.
        """
        self.render = render or (lambda text: None)
        self.config = config or CalculatorConfig()
        self.validator = IncrementalValidator()
        self.pipeline = LogicPipeline()
        self.expression = ""
        self.state = SessionState.EMPTY
        self.last_error: Optional[ExpressionError] = None

    @property
    def display(self) -> str:
        """Text currently representing the expression."""
        return self.expression or self.config.empty_display

    def handle(self, action: str) -> None:
        """
        Dispatch a single action from the presentation layer.

        Args:
            action: A literal, parenthesis, connective name (AND, OR, XOR,
                NOT, IMPLIES, BICOND), control name (clear/C, delete/del,
                evaluate/=) or connective symbol. Anything else is ignored.
        """
        control = ControlAction.from_action(action)
        if control is ControlAction.CLEAR:
            self.clear()
        elif control is ControlAction.DELETE:
            self.delete()
        elif control is ControlAction.EVALUATE:
            self.evaluate()
        else:
            connective = Connective.from_action(action)
            token = connective.symbol if connective else action
            if token not in INPUT_TOKENS:
                logger.debug("Ignored unknown action %r", action)
                return
            self.append(token)

    def clear(self) -> None:
        """Reset to an empty expression."""
        self.expression = ""
        self._set_state(SessionState.EMPTY)
        self.render(self.config.empty_display)

    def append(self, token: str) -> bool:
        """
        Append a token if the incremental validator accepts it.

        Returns:
            True if the token was appended.
        """
        check = self.validator.check(self.expression, token)
        if not check.accepted:
            logger.debug("Rejected %r after %r: rule %s: %s",
                         token, self.expression, check.rule, check.reason)
            return False

        self.expression += token
        self._set_state(SessionState.BUILDING)
        self.render(self.expression)
        return True

    def delete(self) -> None:
        """Remove the last token; ``->`` and ``<->`` are removed whole."""
        if self.expression:
            for operator in MULTI_CHAR_TOKENS:
                if self.expression.endswith(operator):
                    self.expression = self.expression[:-len(operator)]
                    break
            else:
                self.expression = self.expression[:-1]

            self._set_state(SessionState.BUILDING if self.expression else SessionState.EMPTY)

        self.render(self.display)

    def evaluate(self) -> Optional[str]:
        """
        Evaluate the expression.

        On success the expression is replaced by the result literal. On
        failure the error message is rendered and the expression is reset.

        Returns:
            The result literal, or None if evaluation failed.
        """
        try:
            result = self.pipeline.evaluate(self.expression)
        except ExpressionError as e:
            logger.warning("Evaluation of %r failed: %s: %s",
                           self.expression, e.kind.value, e)
            self.last_error = e
            self._set_state(SessionState.ERRORED)
            self.expression = ""
            self._set_state(SessionState.EMPTY)
            self.render(self.config.error_message)
            return None

        self.last_error = None
        self.expression = result
        self._set_state(SessionState.SETTLED)
        self.render(result)
        return result

    def _set_state(self, state: SessionState) -> None:
        if state is not self.state:
            logger.debug("State %s -> %s", self.state.value, state.value)
        self.state = state
