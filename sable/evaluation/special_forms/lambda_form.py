from __future__ import annotations

from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.errors import SableArityError
from sable.types.lambda_fn import Lambda, Macro
from sable.types.environment import Environment


def _build(
    cls: type[Lambda],
    form_name: str,
    tail: list[SExpression],
    env: Environment,
) -> Lambda:
    if len(tail) != 2:
        raise SableArityError(f"{form_name} requires exactly a parameter list and a body")

    bindings, body = tail
    # Only lexical scoping keeps hold of the defining environment.
    captured = env if env.config.scoping == "lexical" else None
    return cls(bindings, body, captured)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(fn (params...) body) builds a Lambda without evaluating anything."""
    return _build(Lambda, "fn", tail, env)


def macro_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(macro (params...) body) builds a Macro without evaluating anything."""
    return _build(Macro, "macro", tail, env)
