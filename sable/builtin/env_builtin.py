"""Primitive procedures seeded into the default environment.

Each primitive here is written against already-evaluated arguments,
`fn(env, args)`. `register` wraps them as NativeProcedures that evaluate
every argument form in the calling environment first.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from sable import LispValue, SExpression
from sable.types.environment import Environment
from sable.types.errors import SableArityError, SableDivisionByZero, SableTypeError
from sable.types.expr_type import Type, expect, type_of
from sable.types.native import NativeProcedure
from sable.types.symbol import Symbol

Primitive = Callable[[Environment, list[Any]], LispValue]


# -------------------------------
# Argument checking
# -------------------------------
def numeric_type(args: list[Any]) -> Type:
    """Return the single numeric type shared by all of `args`.

    The first argument fixes the type for the call; ints and floats are never
    mixed. A non-numeric first argument is reported against FLOAT.
    """
    if not args:
        return Type.NUMBER
    first = args[0]
    if isinstance(first, bool) or not isinstance(first, (int, float)):
        raise SableTypeError(Type.FLOAT, first)
    kind = type_of(first)
    for x in args[1:]:
        expect(kind, x)
    return kind


def bools(args: list[Any]) -> list[bool]:
    return [expect(Type.BOOL, x) for x in args]


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[Any]) -> Any:
    kind = numeric_type(args)
    return sum(args, 0.0 if kind is Type.FLOAT else 0)


def sub(env: Environment, args: list[Any]) -> Any:
    if not args:
        raise SableArityError("- requires at least 1 argument")
    numeric_type(args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(env: Environment, args: list[Any]) -> Any:
    kind = numeric_type(args)
    result = 1.0 if kind is Type.FLOAT else 1
    for x in args:
        result *= x
    return result


def div(env: Environment, args: list[Any]) -> Any:
    if not args:
        raise SableArityError("/ requires at least 1 argument")
    kind = numeric_type(args)
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise SableDivisionByZero("Division by zero")
        # Numbers stay integral; floats use true division.
        result = result // x if kind is Type.NUMBER else result / x
    return result


# -------------------------------
# Comparison
# -------------------------------
def _chain(op: Callable[[Any, Any], bool]) -> Primitive:
    def compare(env: Environment, args: list[Any]) -> bool:
        numeric_type(args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    return compare


equals = _chain(operator.eq)
lt = _chain(operator.lt)
lte = _chain(operator.le)
gt = _chain(operator.gt)
gte = _chain(operator.ge)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(env: Environment, args: list[Any]) -> bool:
    return all(bools(args))


def logical_or(env: Environment, args: list[Any]) -> bool:
    return any(bools(args))


def logical_not(env: Environment, args: list[Any]) -> bool:
    if len(args) != 1:
        raise SableArityError("not requires exactly 1 argument")
    return args[0] is False


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[Any]) -> list[Any]:
    return list(args)


def car(env: Environment, args: list[Any]) -> Any:
    if len(args) != 1:
        raise SableArityError("car requires exactly 1 argument")
    lst = expect(Type.LIST, args[0])
    if not lst:
        raise SableArityError("car of an empty list")
    return lst[0]


def cdr(env: Environment, args: list[Any]) -> list[Any]:
    if len(args) != 1:
        raise SableArityError("cdr requires exactly 1 argument")
    lst = expect(Type.LIST, args[0])
    if not lst:
        raise SableArityError("cdr of an empty list")
    return lst[1:]


def cons(env: Environment, args: list[Any]) -> list[Any]:
    if len(args) != 2:
        raise SableArityError("cons requires exactly 2 arguments")
    head, tail = args
    return [head] + expect(Type.LIST, tail)


def is_empty(env: Environment, args: list[Any]) -> bool:
    if len(args) != 1:
        raise SableArityError("empty? requires exactly 1 argument")
    return not expect(Type.LIST, args[0])


# -------------------------------
# Registration
# -------------------------------
def eager(name: str, fn: Primitive) -> NativeProcedure:
    """Wrap `fn` so that its argument forms are evaluated, left to right, before the call."""
    # Imported lazily to keep the types layer free of evaluator imports.
    from sable.evaluation.evaluator import evaluate

    def call(arg_forms: list[SExpression], env: Environment) -> LispValue:
        return fn(env, [evaluate(form, env) for form in arg_forms])

    return NativeProcedure(name, call)


PRIMITIVES: dict[str, Primitive] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': equals,
    '<': lt,
    '<=': lte,
    '>': gt,
    '>=': gte,
    'and': logical_and,
    'or': logical_or,
    'not': logical_not,
    'list': list_builtin,
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'empty?': is_empty,
}


def register(env: Environment):
    env.update({Symbol(name): eager(name, fn) for name, fn in PRIMITIVES.items()})
