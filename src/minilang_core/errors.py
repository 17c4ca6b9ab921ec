"""Exceptions raised during evaluation.

Every error is fatal to the program being evaluated: nothing inside the
evaluator catches them.
"""

from __future__ import annotations


class MiniLangError(Exception):
    """Base class for all minilang_core errors."""


class EvaluationError(MiniLangError):
    """A program could not be evaluated.

    Args:
        message: What failed and why.
        expression: Source form of the node being evaluated, if known.
    """

    def __init__(self, message: str, expression: str = ""):
        full_message = message
        if expression:
            full_message += f"\nExpression: {expression}"
        super().__init__(full_message)
        self.message = message
        self.expression = expression


class OperatorTypeError(EvaluationError):
    """An operator was applied to operand types it does not accept."""

    def __init__(
        self,
        operator: str,
        operand_types: tuple[str, ...],
        message: str,
        expression: str = "",
    ):
        super().__init__(message, expression)
        self.operator = operator
        self.operand_types = operand_types


class UnsupportedExpressionError(EvaluationError):
    """The evaluator has no implementation for this expression kind."""


class UnsupportedStatementError(EvaluationError):
    """The evaluator has no implementation for this statement kind."""


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    """Integer division with a zero divisor."""


class IntegerOverflowError(EvaluationError, OverflowError):
    """An arithmetic result does not fit in a 32-bit signed integer."""
