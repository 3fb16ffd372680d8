"""Runtime environment for Sable.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups start at the innermost frame and
walk outward, so the first binding found shadows any further out. Mutation
only ever touches the current frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from sable import LispValue
from sable.config import EvalConfig
from sable.types.errors import SableTypeError, SableUnboundSymbol
from sable.types.expr_type import Type
from sable.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Sable values."""

    __slots__ = ("vars", "outer", "_config")

    def __init__(self, outer: Optional[Environment] = None, config: Optional[EvalConfig] = None):
        """Create a frame. Only a root frame (no `outer`) may be given a config.

        Raises ValueError if `config` is passed together with `outer`.
        """
        if outer is not None and config is not None:
            raise ValueError("config can only be set on a root environment")
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Children defer to the root's config.
        self._config: Optional[EvalConfig] = None
        if outer is None:
            self._config = config if config is not None else EvalConfig()

    @classmethod
    def child_of(cls, outer: Environment) -> Environment:
        """Return a new, empty scope whose outer link is `outer`."""
        return cls(outer=outer)

    @property
    def config(self) -> EvalConfig:
        env = self
        while env.outer is not None:
            env = env.outer
        return env._config

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any local binding.

        Raises SableTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SableTypeError(Type.SYMBOL, name)
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name` anywhere in the chain, or None."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def get_local(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name` in this frame only, or None."""
        return self.vars.get(name)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SableUnboundSymbol if not found anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise SableUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
