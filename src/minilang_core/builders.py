"""Shorthand constructors for building node trees in code.

Handy in tests and for hosts that assemble programs without a parser::

    program = [
        expr(9),
        ret(infix(2, "*", 5)),
        expr(9),
    ]
    evaluate_program(program)   # → VInteger(10)

Plain ``int`` and ``bool`` arguments are promoted to literals.
"""

from __future__ import annotations

from typing import get_args

from .nodes import (
    BooleanLiteral,
    Expression,
    ExpressionStatement,
    Identifier,
    IfExpression,
    InfixExpression,
    InfixOperator,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    PrefixOperator,
    ReturnStatement,
    Statement,
)

_STATEMENT_TYPES = get_args(Statement)


def lit(value: Expression | int | bool) -> Expression:
    """Promote a Python ``int``/``bool`` to a literal node."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if isinstance(value, int):
        return IntegerLiteral(value)
    return value


def prefix(op: str | PrefixOperator, right) -> PrefixExpression:
    return PrefixExpression(PrefixOperator(op), lit(right))


def infix(left, op: str | InfixOperator, right) -> InfixExpression:
    return InfixExpression(lit(left), InfixOperator(op), lit(right))


def if_(condition, consequence=(), alternative=()) -> IfExpression:
    """Build an if; bare expressions in either branch become statements."""
    return IfExpression(lit(condition), block(consequence), block(alternative))


def ident(name: str) -> Identifier:
    return Identifier(name)


def expr(expression) -> ExpressionStatement:
    return ExpressionStatement(lit(expression))


def ret(value) -> ReturnStatement:
    return ReturnStatement(lit(value))


def let(name: str, value) -> LetStatement:
    return LetStatement(Identifier(name), lit(value))


def block(items) -> tuple[Statement, ...]:
    """Normalise a branch body to a tuple of statements."""
    if not isinstance(items, (list, tuple)):
        items = (items,)
    return tuple(s if isinstance(s, _STATEMENT_TYPES) else expr(s) for s in items)
