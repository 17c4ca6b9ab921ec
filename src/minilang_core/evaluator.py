"""Evaluator: reduces a parsed program to a single Value."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import (
    DivisionByZeroError,
    EvaluationError,
    IntegerOverflowError,
    OperatorTypeError,
    UnsupportedExpressionError,
    UnsupportedStatementError,
)
from .nodes import (
    ARITHMETIC_OPERATORS,
    COMPARISON_OPERATORS,
    EQUALITY_OPERATORS,
    BooleanLiteral,
    Expression,
    ExpressionStatement,
    IfExpression,
    InfixExpression,
    InfixOperator,
    IntegerLiteral,
    PrefixExpression,
    PrefixOperator,
    ReturnStatement,
    Statement,
    format_program,
)
from .values import (
    INT_MAX,
    INT_MIN,
    TRUE,
    Null,
    Value,
    VBoolean,
    VInteger,
    VReturn,
    native_bool,
    type_name,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate_program(statements: Sequence[Statement]) -> Value:
    """Evaluate a whole program and return its result.

    A ``return`` anywhere stops the program; its value is unwrapped here,
    so the result is never a ``VReturn``.  Any ``EvaluationError`` aborts
    the program and is re-raised to the caller.
    """
    logger.debug("Evaluating program of %d statement(s)", len(statements))
    try:
        result = evaluate_statements(statements)
    except EvaluationError as e:
        logger.error("Evaluation failed: %s", e.message)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Failing program: %s", format_program(statements))
        raise

    if isinstance(result, VReturn):
        result = result.value
    logger.debug("Program result: %s", result)
    return result


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def evaluate_statements(statements: Sequence[Statement]) -> Value:
    """Evaluate *statements* in order.

    Stops at the first ``VReturn`` and hands it back still wrapped.
    Otherwise returns the last statement's value (``Null`` if empty).
    """
    result: Value = Null
    for stmt in statements:
        result = evaluate_statement(stmt)
        if isinstance(result, VReturn):
            return result
    return result


def evaluate_statement(stmt: Statement) -> Value:
    if isinstance(stmt, ExpressionStatement):
        return evaluate_expression(stmt.expression)

    if isinstance(stmt, ReturnStatement):
        value = evaluate_expression(stmt.value)
        # `return if (c) { return x; };` already carries the wrapper
        if isinstance(value, VReturn):
            return value
        return VReturn(value)

    raise UnsupportedStatementError(
        f"unsupported statement type: {type(stmt).__name__}", str(stmt)
    )


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

def evaluate_expression(node: Expression) -> Value:
    if isinstance(node, IntegerLiteral):
        return VInteger(_checked(node.value, node))

    if isinstance(node, BooleanLiteral):
        return native_bool(node.value)

    if isinstance(node, PrefixExpression):
        return _eval_prefix(node)

    if isinstance(node, InfixExpression):
        return _eval_infix(node)

    if isinstance(node, IfExpression):
        return _eval_if(node)

    raise UnsupportedExpressionError(
        f"eval not implemented for expression type: {type(node).__name__}",
        str(node),
    )


def _eval_prefix(node: PrefixExpression) -> Value:
    right = evaluate_expression(node.right)

    if node.operator is PrefixOperator.BANG:
        if isinstance(right, VBoolean):
            return native_bool(not right.value)
        raise OperatorTypeError(
            "!",
            (type_name(right),),
            f"! operator only valid for boolean type, got {type_name(right)}",
            str(node),
        )

    if node.operator is PrefixOperator.MINUS:
        if isinstance(right, VInteger):
            return VInteger(_checked(-right.value, node))
        raise OperatorTypeError(
            "-",
            (type_name(right),),
            f"minus operator only valid for integer type, got {type_name(right)}",
            str(node),
        )

    raise UnsupportedExpressionError(
        f"unknown prefix operator: {node.operator!r}", str(node)
    )


def _eval_infix(node: InfixExpression) -> Value:
    left = evaluate_expression(node.left)
    right = evaluate_expression(node.right)
    op = node.operator

    if op in ARITHMETIC_OPERATORS or op in COMPARISON_OPERATORS:
        if not (isinstance(left, VInteger) and isinstance(right, VInteger)):
            raise _operand_error(node, left, right, "only valid on integer types")
        if op is InfixOperator.PLUS:
            return VInteger(_checked(left.value + right.value, node))
        if op is InfixOperator.MINUS:
            return VInteger(_checked(left.value - right.value, node))
        if op is InfixOperator.ASTERISK:
            return VInteger(_checked(left.value * right.value, node))
        if op is InfixOperator.SLASH:
            return VInteger(_checked(_int_div(left.value, right.value, node), node))
        if op is InfixOperator.LT:
            return native_bool(left.value < right.value)
        return native_bool(left.value > right.value)

    if op in EQUALITY_OPERATORS:
        same_variant = (
            (isinstance(left, VInteger) and isinstance(right, VInteger))
            or (isinstance(left, VBoolean) and isinstance(right, VBoolean))
        )
        if not same_variant:
            raise _operand_error(node, left, right, "used on invalid types")
        if op is InfixOperator.EQ:
            return native_bool(left.value == right.value)
        return native_bool(left.value != right.value)

    raise UnsupportedExpressionError(
        f"unknown infix operator: {op!r}", str(node)
    )


def _eval_if(node: IfExpression) -> Value:
    # Strict: only the value true selects the consequence, no truthiness.
    if evaluate_expression(node.condition) == TRUE:
        return evaluate_statements(node.consequence)
    return evaluate_statements(node.alternative)


# ---------------------------------------------------------------------------
# Integer helpers
# ---------------------------------------------------------------------------

def _int_div(a: int, b: int, node: InfixExpression) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise DivisionByZeroError("division by zero", str(node))
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _checked(result: int, node: Expression) -> int:
    if result < INT_MIN or result > INT_MAX:
        raise IntegerOverflowError(
            f"integer overflow: {result} does not fit in 32 bits", str(node)
        )
    return result


_OPERATOR_NAMES = {
    InfixOperator.PLUS: "plus",
    InfixOperator.MINUS: "minus",
    InfixOperator.ASTERISK: "multiply",
    InfixOperator.SLASH: "divide",
    InfixOperator.LT: "less than",
    InfixOperator.GT: "greater than",
    InfixOperator.EQ: "equals",
    InfixOperator.NOT_EQ: "not equals",
}


def _operand_error(
    node: InfixExpression, left: Value, right: Value, reason: str
) -> OperatorTypeError:
    types = (type_name(left), type_name(right))
    return OperatorTypeError(
        str(node.operator),
        types,
        f"{_OPERATOR_NAMES[node.operator]} operator {reason}, got {types[0]} and {types[1]}",
        str(node),
    )
