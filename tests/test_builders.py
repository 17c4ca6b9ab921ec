"""Tests for minilang_core.builders."""

import pytest

from minilang_core.builders import block, expr, ident, if_, infix, let, lit, prefix, ret
from minilang_core.nodes import (
    BooleanLiteral,
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
)


class TestLit:
    def test_int(self):
        assert lit(5) == IntegerLiteral(5)

    def test_bool_is_not_int(self):
        assert lit(True) == BooleanLiteral(True)

    def test_node_passes_through(self):
        node = Identifier("a")
        assert lit(node) is node


def test_prefix():
    assert prefix("!", True) == PrefixExpression(PrefixOperator.BANG, BooleanLiteral(True))


def test_infix_accepts_enum_or_symbol():
    expected = InfixExpression(IntegerLiteral(1), InfixOperator.LT, IntegerLiteral(2))
    assert infix(1, "<", 2) == expected
    assert infix(1, InfixOperator.LT, 2) == expected


def test_infix_unknown_symbol():
    with pytest.raises(ValueError):
        infix(1, "%", 2)


def test_if_wraps_bare_expressions():
    node = if_(True, [10], [11])
    assert node == IfExpression(
        BooleanLiteral(True),
        (ExpressionStatement(IntegerLiteral(10)),),
        (ExpressionStatement(IntegerLiteral(11)),),
    )


def test_if_defaults_to_empty_branches():
    assert if_(False).consequence == ()
    assert if_(False).alternative == ()


def test_statements():
    assert expr(1) == ExpressionStatement(IntegerLiteral(1))
    assert ret(False) == ReturnStatement(BooleanLiteral(False))
    assert let("a", 1) == LetStatement(Identifier("a"), IntegerLiteral(1))
    assert ident("b") == Identifier("b")


class TestBlock:
    def test_single_statement(self):
        assert block(ret(1)) == (ReturnStatement(IntegerLiteral(1)),)

    def test_single_value(self):
        assert block(3) == (ExpressionStatement(IntegerLiteral(3)),)

    def test_mixed(self):
        assert block([1, ret(2)]) == (
            ExpressionStatement(IntegerLiteral(1)),
            ReturnStatement(IntegerLiteral(2)),
        )
