"""User-defined procedure and macro values for Sable."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Optional

from sable import SExpression
from sable.types.printer import to_lisp_string

if TYPE_CHECKING:
    from sable.types.environment import Environment


class Lambda:
    """A first-class procedure built by `fn`.

    `bindings` (conventionally a list of Symbols) and `body` are held by
    reference and never copied, so building one is O(1) and many values may
    share the same subtree. `env` is only set when the procedure was created
    under lexical scoping; otherwise calls extend the caller's environment.
    """

    __slots__ = ("bindings", "body", "env")

    label = "fn"

    def __init__(self, bindings: SExpression, body: SExpression, env: Optional[Environment] = None):
        self.bindings: SExpression = bindings
        self.body: SExpression = body
        self.env: Optional[Environment] = env

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and other.bindings is self.bindings
            and other.body is self.body
            and other.env is self.env
        )

    def __hash__(self) -> int:
        return hash((type(self), id(self.bindings), id(self.body)))

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"({self.label} ")
            buffer.write(to_lisp_string(self.bindings))
            buffer.write(" ")
            buffer.write(to_lisp_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the procedure."""
        return str(self)


class Macro(Lambda):
    """Same shape as Lambda, but applied to unevaluated forms during expansion."""

    __slots__ = ()

    label = "macro"
