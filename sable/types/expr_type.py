"""Type tags for Sable values, used in type-mismatch reports."""

from __future__ import annotations

from enum import Enum

from sable import LispValue
from sable.types.symbol import Symbol
from sable.types.native import NativeProcedure
from sable.types.lambda_fn import Lambda, Macro
from sable.types.errors import SableTypeError


class Type(Enum):
    SYMBOL = "symbol"
    NUMBER = "number"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    LIST = "list"
    PROCEDURE = "procedure"
    LAMBDA = "lambda"
    MACRO = "macro"


def type_of(value: LispValue) -> Type:
    # bool before int: bool is an int subclass in Python
    if isinstance(value, bool):
        return Type.BOOL
    if isinstance(value, int):
        return Type.NUMBER
    if isinstance(value, float):
        return Type.FLOAT
    if isinstance(value, str):
        return Type.STRING
    if isinstance(value, Symbol):
        return Type.SYMBOL
    if isinstance(value, list):
        return Type.LIST
    if isinstance(value, NativeProcedure):
        return Type.PROCEDURE
    # Macro before Lambda: Macro subclasses Lambda
    if isinstance(value, Macro):
        return Type.MACRO
    if isinstance(value, Lambda):
        return Type.LAMBDA
    raise SableTypeError(None, value)


def expect(expected: Type, value: LispValue) -> LispValue:
    """Return `value` unchanged if it has type `expected`, else raise SableTypeError."""
    try:
        actual = type_of(value)
    except SableTypeError:
        actual = None
    if actual is not expected:
        raise SableTypeError(expected, value)
    return value
