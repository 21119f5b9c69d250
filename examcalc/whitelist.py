"""Process-wide whitelist tables and the angle mode enum."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class AngleMode(str, Enum):
    DEGREES = "DEG"
    RADIANS = "RAD"

    @classmethod
    def coerce(cls, value: "AngleMode | str") -> "AngleMode":
        """Accept an AngleMode or a case-insensitive name such as "deg" or "radians"."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        if key in ("DEG", "DEGREE", "DEGREES"):
            return cls.DEGREES
        if key in ("RAD", "RADIAN", "RADIANS"):
            return cls.RADIANS
        raise ValueError(f"Unknown angle mode: {value!r}")


ALLOWED_SYMBOLS = frozenset({"pi", "e", "ans"})

FUNCTION_ARITY = MappingProxyType(
    {
        "sin": 1,
        "cos": 1,
        "tan": 1,
        "asin": 1,
        "acos": 1,
        "atan": 1,
        "log": 1,
        "ln": 1,
        "log10": 1,
        "sqrt": 1,
        "exp": 1,
    }
)

# Derived from the arity table so the two can never disagree.
ALLOWED_FUNCTIONS = frozenset(FUNCTION_ARITY)

ALLOWED_BINARY_OPERATORS = frozenset({"+", "-", "*", "/", "^"})

ALLOWED_UNARY_OPERATORS = frozenset({"+", "-"})
