"""Identifiers of the Sable language.

A Symbol is kept apart from `str` so that string literals evaluate to
themselves while symbols are looked up in the environment.
"""

from __future__ import annotations

import sys


class Symbol:
    """A name, compared and hashed by its text."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned, so equal names usually share one str object.
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        return self.id
