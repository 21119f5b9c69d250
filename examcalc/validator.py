"""Structural whitelist over the expression tree.

Only constructs enumerated in ``examcalc.whitelist`` pass; everything else,
including node kinds this module has never heard of, is rejected.
"""

from __future__ import annotations

import logging

from .errors import UnsafeExpressionError
from .nodes import BinaryOp, Call, Constant, Node, Parenthesis, Symbol, UnaryOp
from .normalizer import normalize
from .parser import parse
from .whitelist import (
    ALLOWED_BINARY_OPERATORS,
    ALLOWED_FUNCTIONS,
    ALLOWED_SYMBOLS,
    ALLOWED_UNARY_OPERATORS,
    FUNCTION_ARITY,
)

logger = logging.getLogger(__name__)


def is_safe(node: Node) -> bool:
    if isinstance(node, Constant):
        return True

    if isinstance(node, Symbol):
        return node.name in ALLOWED_SYMBOLS

    if isinstance(node, Parenthesis):
        return is_safe(node.inner)

    if isinstance(node, BinaryOp):
        if node.op not in ALLOWED_BINARY_OPERATORS:
            return False
        return is_safe(node.left) and is_safe(node.right)

    if isinstance(node, UnaryOp):
        if node.op not in ALLOWED_UNARY_OPERATORS:
            return False
        return is_safe(node.operand)

    if isinstance(node, Call):
        if node.name not in ALLOWED_FUNCTIONS:
            return False
        if len(node.args) != FUNCTION_ARITY[node.name]:
            return False
        return all(is_safe(arg) for arg in node.args)

    return False


def ensure_safe_expression(expression: str) -> Node:
    """Normalize and parse ``expression``; return the tree only if it is whitelisted."""
    normalized = normalize(expression)
    parsed = parse(normalized)
    if not is_safe(parsed):
        logger.debug("Rejected unsafe expression: %r", normalized)
        raise UnsafeExpressionError()
    return parsed
