"""Built-in procedures implemented in Python."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from sable import SExpression, LispValue

if TYPE_CHECKING:
    from sable.types.environment import Environment


class NativeProcedure:
    """An opaque, immutable built-in callable.

    The wrapped function receives the *unevaluated* argument forms and the
    calling environment, and decides itself whether and how to evaluate them.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[SExpression], Environment], LispValue]):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "fn", fn)

    def __setattr__(self, key, value):
        raise AttributeError(f"NativeProcedure {self.name} is immutable")

    def __call__(self, args: list[SExpression], env: Environment) -> LispValue:
        return self.fn(args, env)

    def __str__(self) -> str:
        return f"#<native {self.name}>"

    def __repr__(self) -> str:
        return f"NativeProcedure({self.name!r})"
