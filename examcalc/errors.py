"""Error taxonomy for the calculator core.

Every stage raises one of these and stops; ``str(err)`` is the message the
calling UI shows verbatim.
"""

from __future__ import annotations


class CalculatorError(ValueError):
    """Base class for every failure surfaced by ``evaluate_expression``."""


class EmptyInputError(CalculatorError):
    def __init__(self, message: str = "Enter an expression to evaluate.") -> None:
        super().__init__(message)


class ExpressionSyntaxError(CalculatorError):
    """Raised when normalized text is not a well-formed infix expression."""

    def __init__(self, message: str, position: int | None = None) -> None:
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(f"Invalid expression: {message}")
        self.position = position


class UnsafeExpressionError(CalculatorError):
    def __init__(self, message: str = "Unsupported or unsafe expression") -> None:
        super().__init__(message)


class EvaluationError(CalculatorError):
    def __init__(self, message: str = "Expression did not produce a finite number.") -> None:
        super().__init__(message)
