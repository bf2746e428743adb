"""
Logic engine for Logicalc.

Provides tokenization, infix-to-postfix conversion and postfix evaluation.
"""

from .tokenizer import Token, TokenKind, tokenize
from .precedence import get_precedence
from .converter import to_postfix
from .evaluator import PostfixEvaluator, evaluate_postfix

__all__ = [
    "Token",
    "TokenKind",
    "tokenize",
    "get_precedence",
    "to_postfix",
    "PostfixEvaluator",
    "evaluate_postfix",
]
