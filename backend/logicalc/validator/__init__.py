"""
Logicalc Validation.

This package provides the two structural checks applied to expressions:
- Incremental Validation (is the next token allowed?)
- Completeness Validation (is the expression ready to evaluate?)
"""

from .incremental import IncrementalValidator, InputCheck, is_valid_input
from .completeness import (
    CompletenessChecker,
    CompletenessIssue,
    CompletenessResult,
    is_complete,
)

__all__ = [
    # Incremental
    "IncrementalValidator",
    "InputCheck",
    "is_valid_input",
    # Completeness
    "CompletenessChecker",
    "CompletenessIssue",
    "CompletenessResult",
    "is_complete",
]
