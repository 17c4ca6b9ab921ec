"""Program nodes handed to the evaluator by the parser.

Nodes are immutable: every node is a frozen dataclass and statement
sequences are tuples.  ``str(node)`` renders the canonical source form,
which is what error messages show.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------

class PrefixOperator(Enum):
    BANG = "!"
    MINUS = "-"

    def __str__(self) -> str:
        return self.value


class InfixOperator(Enum):
    PLUS = "+"
    MINUS = "-"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    def __str__(self) -> str:
        return self.value


ARITHMETIC_OPERATORS = frozenset(
    {InfixOperator.PLUS, InfixOperator.MINUS, InfixOperator.ASTERISK, InfixOperator.SLASH}
)
COMPARISON_OPERATORS = frozenset({InfixOperator.LT, InfixOperator.GT})
EQUALITY_OPERATORS = frozenset({InfixOperator.EQ, InfixOperator.NOT_EQ})


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Identifier:
    """Variable reference.  Parsed, but not evaluated (no bindings)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class PrefixExpression:
    operator: PrefixOperator
    right: Expression

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass(frozen=True, slots=True)
class InfixExpression:
    left: Expression
    operator: InfixOperator
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass(frozen=True, slots=True)
class IfExpression:
    """``if (condition) { consequence } else { alternative }``

    An absent ``else`` is an empty *alternative*.
    """

    condition: Expression
    consequence: tuple[Statement, ...]
    alternative: tuple[Statement, ...] = ()

    def __str__(self) -> str:
        text = f"if ({self.condition}) {_block(self.consequence)}"
        if self.alternative:
            text += f" else {_block(self.alternative)}"
        return text


Expression = Union[
    IntegerLiteral,
    BooleanLiteral,
    Identifier,
    PrefixExpression,
    InfixExpression,
    IfExpression,
]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    expression: Expression

    def __str__(self) -> str:
        return f"{self.expression};"


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    value: Expression

    def __str__(self) -> str:
        return f"return {self.value};"


@dataclass(frozen=True, slots=True)
class LetStatement:
    """``let name = value;``  Parsed, but not evaluated (no bindings)."""

    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


Statement = Union[ExpressionStatement, ReturnStatement, LetStatement]


def _block(statements: tuple[Statement, ...]) -> str:
    if not statements:
        return "{ }"
    return "{ " + " ".join(str(s) for s in statements) + " }"


def format_program(statements) -> str:
    """Render a statement sequence as one line of source text."""
    return " ".join(str(s) for s in statements)
