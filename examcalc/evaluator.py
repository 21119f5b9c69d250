"""AST evaluator for calculator."""

from __future__ import annotations

import logging
import math
import operator
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .errors import EvaluationError
from .nodes import BinaryOp, Call, Constant, Node, Parenthesis, Symbol, UnaryOp
from .whitelist import AngleMode

logger = logging.getLogger(__name__)


_BIN_OPS: Mapping[str, Callable[[float, float], Any]] = MappingProxyType(
    {
        "+": operator.add,
        "-": operator.sub,
        "*": operator.mul,
        "/": operator.truediv,
        "^": operator.pow,
    }
)

_UNARY_OPS: Mapping[str, Callable[[float], float]] = MappingProxyType(
    {
        "+": operator.pos,
        "-": operator.neg,
    }
)


def to_radians(value: float, mode: AngleMode) -> float:
    return value * math.pi / 180 if mode is AngleMode.DEGREES else value


def from_radians(value: float, mode: AngleMode) -> float:
    return value * 180 / math.pi if mode is AngleMode.DEGREES else value


def build_scope(angle_mode: AngleMode | str, previous_answer: float = 0.0) -> Mapping[str, Any]:
    """Bind every whitelisted symbol and function for a single evaluation."""
    mode = AngleMode.coerce(angle_mode)
    return MappingProxyType(
        {
            "sin": lambda x: math.sin(to_radians(x, mode)),
            "cos": lambda x: math.cos(to_radians(x, mode)),
            "tan": lambda x: math.tan(to_radians(x, mode)),
            "asin": lambda x: from_radians(math.asin(x), mode),
            "acos": lambda x: from_radians(math.acos(x), mode),
            "atan": lambda x: from_radians(math.atan(x), mode),
            "log": math.log,
            "ln": math.log,
            "log10": math.log10,
            "sqrt": math.sqrt,
            "exp": math.exp,
            "pi": math.pi,
            "e": math.e,
            "ans": float(previous_answer),
        }
    )


def _real(value: Any) -> float:
    # float ** float returns a complex for negative bases with fractional exponents.
    if isinstance(value, complex):
        raise ValueError("complex result")
    return float(value)


def evaluate_node(node: Node, scope: Mapping[str, Any]) -> float:
    if isinstance(node, Constant):
        return float(node.value)

    if isinstance(node, Symbol):
        return float(scope[node.name])

    if isinstance(node, Parenthesis):
        return evaluate_node(node.inner, scope)

    if isinstance(node, BinaryOp):
        left = evaluate_node(node.left, scope)
        right = evaluate_node(node.right, scope)
        return _real(_BIN_OPS[node.op](left, right))

    if isinstance(node, UnaryOp):
        return _UNARY_OPS[node.op](evaluate_node(node.operand, scope))

    if isinstance(node, Call):
        args = [evaluate_node(arg, scope) for arg in node.args]
        return _real(scope[node.name](*args))

    raise ValueError(f"Unsupported expression: {type(node).__name__}")


def evaluate(node: Node, angle_mode: AngleMode | str, previous_answer: float = 0.0) -> float:
    """Reduce a tree to one finite float or raise EvaluationError.

    The tree should already have passed ``is_safe``; unknown names or wrong
    argument counts still fail as EvaluationError rather than leaking
    lookup or call errors.
    """
    scope = build_scope(angle_mode, previous_answer)
    try:
        value = evaluate_node(node, scope)
    except (ArithmeticError, ValueError, LookupError, TypeError) as exc:
        logger.debug("Evaluation failed: %s", exc)
        raise EvaluationError() from exc
    if not math.isfinite(value):
        logger.debug("Evaluation produced non-finite value: %r", value)
        raise EvaluationError()
    return value
