"""Render Sable values back into their source-like textual form."""

from __future__ import annotations

from sable import LispValue
from sable.types.symbol import Symbol


def _escape(s: str) -> str:
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\t", "\\t")


def to_lisp_string(value: LispValue, readable: bool = True) -> str:
    """Return the printed representation of `value`.

    With `readable` set, strings are quoted and escaped so the output reads
    back as the same value. Otherwise a top-level string is emitted raw,
    which is what `print`/`println` want.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{_escape(value)}"' if readable else value
    if isinstance(value, Symbol):
        return value.id
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, list):
        return "(" + " ".join(to_lisp_string(v) for v in value) + ")"
    # ints, procedures and anything else carry their own __str__
    return str(value)
