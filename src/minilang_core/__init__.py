"""minilang core — tree-walking evaluator for parsed minilang programs."""

from .builders import block, expr, ident, if_, infix, let, lit, prefix, ret
from .errors import (
    DivisionByZeroError,
    EvaluationError,
    IntegerOverflowError,
    MiniLangError,
    OperatorTypeError,
    UnsupportedExpressionError,
    UnsupportedStatementError,
)
from .evaluator import (
    evaluate_expression,
    evaluate_program,
    evaluate_statement,
    evaluate_statements,
)
from .logging_config import get_logger, setup_logging
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
    format_program,
)
from .values import (
    INT_MAX,
    INT_MIN,
    Null,
    Value,
    VBoolean,
    VInteger,
    VReturn,
    _Null,
)

__all__ = [
    "evaluate_program",
    "evaluate_statements",
    "evaluate_statement",
    "evaluate_expression",
    "BooleanLiteral",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "IfExpression",
    "InfixExpression",
    "InfixOperator",
    "IntegerLiteral",
    "LetStatement",
    "PrefixExpression",
    "PrefixOperator",
    "ReturnStatement",
    "Statement",
    "format_program",
    "INT_MAX",
    "INT_MIN",
    "Null",
    "Value",
    "VBoolean",
    "VInteger",
    "VReturn",
    "_Null",
    "MiniLangError",
    "EvaluationError",
    "OperatorTypeError",
    "UnsupportedExpressionError",
    "UnsupportedStatementError",
    "DivisionByZeroError",
    "IntegerOverflowError",
    "block",
    "expr",
    "ident",
    "if_",
    "infix",
    "let",
    "lit",
    "prefix",
    "ret",
    "setup_logging",
    "get_logger",
]
