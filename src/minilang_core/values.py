"""Value types produced by evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Integers are 32-bit signed; results outside this range are an error.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class VInteger:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VBoolean:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


class _Null:
    """Singleton for the result of an if without a taken branch."""

    _instance: "_Null | None" = None

    def __new__(cls) -> "_Null":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False


Null = _Null()

TRUE = VBoolean(True)
FALSE = VBoolean(False)


@dataclass(frozen=True, slots=True)
class VReturn:
    """A value on its way out of a ``return``.

    Only seen while a statement sequence is being evaluated; the program
    boundary strips it.  Never wraps another ``VReturn``.
    """

    value: Value

    def __post_init__(self) -> None:
        if isinstance(self.value, VReturn):
            raise ValueError("VReturn cannot wrap another VReturn")

    def __str__(self) -> str:
        return f"return {self.value}"


Value = Union[VInteger, VBoolean, _Null, VReturn]


def native_bool(b: bool) -> VBoolean:
    return TRUE if b else FALSE


def type_name(value: Value) -> str:
    """Short lowercase name of a value's variant, for diagnostics."""
    if isinstance(value, VInteger):
        return "integer"
    if isinstance(value, VBoolean):
        return "boolean"
    if isinstance(value, _Null):
        return "null"
    if isinstance(value, VReturn):
        return "return"
    return type(value).__name__
