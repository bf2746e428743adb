"""
Logicalc: interactive propositional logic calculator.

This package provides an incremental input validator, a shunting-yard
infix-to-postfix converter and a postfix evaluator for expressions over
the literals 0 and 1.
"""

from .errors import ErrorKind, ExpressionError
from .models import (
    CalculatorConfig,
    Connective,
    ControlAction,
    SessionState,
)
from .pipeline import LogicPipeline, evaluate_expression
from .session import LogicCalculator

__version__ = "1.0.0"
__all__ = [
    "ErrorKind",
    "ExpressionError",
    "CalculatorConfig",
    "Connective",
    "ControlAction",
    "SessionState",
    "LogicPipeline",
    "evaluate_expression",
    "LogicCalculator",
]
