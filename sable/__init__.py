"""Sable: a small S-expression language evaluated by walking its syntax tree.

Programs and data share one representation. Numbers, booleans, strings and
lists are plain Python values; symbols and procedures have their own
classes under `sable.types`. The aliases below only document intent in
signatures: `SExpression` marks code handled as data (reader, quasiquote,
macro expansion), `LispValue` marks a result of evaluation.
"""

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Signature of `evaluate(expr, env)`; special forms receive it as a callback.
EvaluatorFn = Callable[..., LispValue]
