"""Single entry point consumed by calculator front ends."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import EmptyInputError
from .evaluator import evaluate
from .formatter import format_value
from .validator import ensure_safe_expression
from .whitelist import AngleMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    value: float
    formatted: str


def evaluate_expression(
    expression: str, angle_mode: AngleMode | str, previous_answer: float = 0.0
) -> Evaluation:
    """Normalize, parse, validate, evaluate and format ``expression``.

    Raises a ``CalculatorError`` subclass on any failure; no partial result is
    ever returned. ``previous_answer`` is bound to ``ans`` for this call only.
    """
    if not (expression or "").strip():
        raise EmptyInputError()

    mode = AngleMode.coerce(angle_mode)
    parsed = ensure_safe_expression(expression)
    value = evaluate(parsed, mode, previous_answer)
    formatted = format_value(value)
    logger.debug("Evaluated %r (%s) -> %s", expression, mode.value, formatted)
    return Evaluation(value=value, formatted=formatted)
