from __future__ import annotations

from sable import LispValue, SExpression
from sable.types.environment import Environment
from sable.types.errors import SableArityError
from sable.types.expr_type import Type, expect


def bind_arguments(
    bindings: SExpression,
    supplied_args: list[LispValue],
    outer_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding in Sable.

    Pairs each formal Symbol in `bindings` with the supplied value at the
    same position and returns a new Environment, child of `outer_env`,
    holding those bindings. Used for both procedure calls (evaluated values)
    and macro expansion (unevaluated forms).

    Raises SableTypeError if `bindings` is not a list of Symbols and
    SableArityError if the counts differ.
    """
    formals = expect(Type.LIST, bindings)
    if len(formals) != len(supplied_args):
        raise SableArityError(
            f"Expected {len(formals)} argument(s), got {len(supplied_args)}"
        )

    local_env = Environment.child_of(outer_env)
    for formal, value in zip(formals, supplied_args):
        local_env.define(formal, value)
    return local_env
