from __future__ import annotations
import os
import sys
from dataclasses import dataclass, replace
from typing import Literal, Optional, TextIO


Scoping = Literal["dynamic", "lexical"]

_SCOPINGS = ("dynamic", "lexical")

# Defaults
DEFAULT_SCOPING: Scoping = "dynamic"
DEFAULT_MAX_EXPANSION_DEPTH = 1000


@dataclass(frozen=True)
class EvalConfig:
    """Evaluation settings carried by the root environment.

    - scoping: "dynamic" binds a procedure's parameters in a child of the
      caller's environment; "lexical" uses the environment captured when the
      `fn`/`macro` form was evaluated.
    - max_expansion_depth: bound on successive macro rewrites at one position
      (and on nesting of expansions); None means unbounded.
    - stdin/stdout: streams used by the I/O primitives; None means the
      process streams at the time of the call.
    """

    scoping: Scoping = DEFAULT_SCOPING
    max_expansion_depth: Optional[int] = DEFAULT_MAX_EXPANSION_DEPTH
    stdin: Optional[TextIO] = None
    stdout: Optional[TextIO] = None

    def __post_init__(self):
        if self.scoping not in _SCOPINGS:
            raise ValueError(f"scoping must be one of {_SCOPINGS}, got {self.scoping!r}")
        if self.max_expansion_depth is not None and self.max_expansion_depth < 1:
            raise ValueError("max_expansion_depth must be a positive integer or None")

    @property
    def input_stream(self) -> TextIO:
        return self.stdin if self.stdin is not None else sys.stdin

    @property
    def output_stream(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    def with_streams(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> EvalConfig:
        return replace(self, stdin=stdin, stdout=stdout)

    @classmethod
    def from_env(cls) -> EvalConfig:
        """Build a config from SABLE_SCOPING and SABLE_MAX_EXPANSION_DEPTH."""
        return cls(
            scoping=os.environ.get("SABLE_SCOPING", DEFAULT_SCOPING).strip().lower(),
            max_expansion_depth=_depth_from_env(os.environ.get("SABLE_MAX_EXPANSION_DEPTH")),
        )


def _depth_from_env(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return DEFAULT_MAX_EXPANSION_DEPTH
    raw = raw.strip().lower()
    if raw in ("none", "0"):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SABLE_MAX_EXPANSION_DEPTH must be an integer or 'none', got {raw!r}")
