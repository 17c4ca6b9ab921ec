"""Tests for minilang_core.errors."""

from minilang_core.errors import (
    DivisionByZeroError,
    EvaluationError,
    IntegerOverflowError,
    MiniLangError,
    OperatorTypeError,
    UnsupportedExpressionError,
    UnsupportedStatementError,
)


def test_message_without_expression():
    e = EvaluationError("boom")
    assert str(e) == "boom"
    assert e.message == "boom"
    assert e.expression == ""


def test_message_with_expression():
    e = EvaluationError("boom", "(1 + true)")
    assert str(e) == "boom\nExpression: (1 + true)"
    assert e.expression == "(1 + true)"


def test_operator_type_error_fields():
    e = OperatorTypeError("!", ("integer",), "bad", "(!5)")
    assert e.operator == "!"
    assert e.operand_types == ("integer",)
    assert e.message == "bad"


def test_hierarchy():
    for cls in (
        OperatorTypeError,
        UnsupportedExpressionError,
        UnsupportedStatementError,
        DivisionByZeroError,
        IntegerOverflowError,
    ):
        assert issubclass(cls, EvaluationError)
        assert issubclass(cls, MiniLangError)


def test_builtin_bases():
    assert issubclass(DivisionByZeroError, ZeroDivisionError)
    assert issubclass(IntegerOverflowError, OverflowError)
    e = DivisionByZeroError("division by zero", "(1 / 0)")
    assert e.expression == "(1 / 0)"
