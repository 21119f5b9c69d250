"""Exam-safe scientific calculator core."""

from .engine import Evaluation, evaluate_expression
from .errors import (
    CalculatorError,
    EmptyInputError,
    EvaluationError,
    ExpressionSyntaxError,
    UnsafeExpressionError,
)
from .evaluator import build_scope, evaluate
from .formatter import format_value
from .normalizer import normalize
from .parser import parse
from .validator import ensure_safe_expression, is_safe
from .whitelist import AngleMode

__all__ = [
    "AngleMode",
    "CalculatorError",
    "EmptyInputError",
    "Evaluation",
    "EvaluationError",
    "ExpressionSyntaxError",
    "UnsafeExpressionError",
    "build_scope",
    "ensure_safe_expression",
    "evaluate",
    "evaluate_expression",
    "format_value",
    "is_safe",
    "normalize",
    "parse",
]
