"""Application engine for Sable.

This module centralizes procedure application:
- Native procedures receive the unevaluated argument forms and the calling
  environment, and evaluate what they need themselves.
- Lambdas have every argument evaluated eagerly in the calling environment,
  then run their body in a fresh scope binding parameters to those values.
- Anything else in head position makes the list malformed.
"""

from __future__ import annotations

from sable import SExpression, LispValue, EvaluatorFn
from sable.types.bind import bind_arguments
from sable.types.environment import Environment
from sable.types.errors import SableMalformedList
from sable.types.lambda_fn import Lambda, Macro
from sable.types.native import NativeProcedure


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to already-evaluated arguments.

    Under dynamic scoping (no captured env) the call scope is a child of
    `caller_env`; a lambda built under lexical scoping extends the
    environment it was created in instead.
    """
    outer = fn.env if fn.env is not None else caller_env
    call_env = bind_arguments(fn.bindings, args, outer)
    return evaluate_fn(fn.body, call_env)


def apply(
    head: LispValue,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    form: SExpression,
) -> LispValue:
    """Apply an evaluated head to the remaining (unevaluated) forms of `form`."""
    if isinstance(head, NativeProcedure):
        return head(arg_forms, env)
    # Macros are expanded before evaluation; one reaching here was not.
    if isinstance(head, Lambda) and not isinstance(head, Macro):
        args = [evaluate_fn(arg, env) for arg in arg_forms]
        return apply_lambda(head, args, env, evaluate_fn)
    raise SableMalformedList(form)
