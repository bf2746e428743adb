"""
Logicalc models.

Enumerations for connectives, control actions and session states, plus the
Pydantic configuration model.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Connective(str, Enum):
    """
    Logical connectives, keyed by action name.

    Each member's value is the canonical symbol appended to the expression.
    """

    AND = "^"
    OR = "v"
    XOR = "⊕"
    NOT = "~"
    IMPLIES = "->"
    BICOND = "<->"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_action(cls, action: str) -> Optional["Connective"]:
        """Look up a connective by its action name (e.g. ``"AND"``)."""
        try:
            return cls[action.upper()]
        except KeyError:
            return None


class ControlAction(str, Enum):
    """Control actions understood by the calculator."""

    CLEAR = "clear"
    DELETE = "delete"
    EVALUATE = "evaluate"

    @classmethod
    def from_action(cls, action: str) -> Optional["ControlAction"]:
        """Look up a control action by name or button alias."""
        return CONTROL_ALIASES.get(action.lower())


# Button labels used by the calculator keypad
CONTROL_ALIASES = {
    "clear": ControlAction.CLEAR,
    "c": ControlAction.CLEAR,
    "delete": ControlAction.DELETE,
    "del": ControlAction.DELETE,
    "evaluate": ControlAction.EVALUATE,
    "=": ControlAction.EVALUATE,
}


class SessionState(str, Enum):
    """Lifecycle states of a calculator session."""

    EMPTY = "empty"
    BUILDING = "building"
    SETTLED = "settled"
    ERRORED = "errored"


class CalculatorConfig(BaseModel):
    """Calculator configuration."""

    error_message: str = Field(
        default="Error: Logika salah",
        min_length=1,
        description="Message rendered when evaluation fails",
    )
    empty_display: str = Field(
        default="0",
        description="Text rendered when the expression is empty",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the terminal front-end",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
