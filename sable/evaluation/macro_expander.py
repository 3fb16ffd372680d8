"""Macro expansion for Sable.

Macros are ordinary values (`Macro`) bound in the environment. A list whose
head symbol is bound to one is a macro call: the macro's parameters are bound
to the call's *unevaluated* argument forms in a fresh scope, and the macro
body is evaluated there to produce replacement code.

`expand_all` rewrites a whole tree before evaluation ever sees it:
- each position is expanded to a fixed point (until its head no longer
  names a macro), then its subforms are expanded in turn;
- quote and quasiquote templates are data, and so is the operand of
  `m-expand1`/`m-expand`; none of them is descended into, and neither are
  the parameter lists of `fn`/`macro` or the names in a `let` binding list;
- the number of successive rewrites along any path is bounded by the root
  environment's `max_expansion_depth`. A macro that re-introduces its own
  call fails with SableExpansionError instead of recursing forever.
"""

from __future__ import annotations

import logging
from typing import Optional

from sable import SExpression, EvaluatorFn
from sable.types.bind import bind_arguments
from sable.types.environment import Environment
from sable.types.errors import SableExpansionError
from sable.types.lambda_fn import Macro
from sable.types.printer import to_lisp_string
from sable.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Forms whose operand is never expanded.
INERT_FORMS = (Symbol("quote"), Symbol("quasiquote"), Symbol("m-expand1"), Symbol("m-expand"))
PROCEDURE_FORMS = (Symbol("fn"), Symbol("macro"))
LET = Symbol("let")


def _default_evaluator() -> EvaluatorFn:
    # Imported lazily: the evaluator's special forms depend on this module.
    from sable.evaluation.evaluator import evaluate
    return evaluate


def macro_for(expr: SExpression, env: Environment) -> Optional[Macro]:
    """Return the Macro named by `expr`'s head symbol, or None if it is not a macro call."""
    if isinstance(expr, list) and expr and isinstance(expr[0], Symbol):
        value = env.get(expr[0])
        if isinstance(value, Macro):
            return value
    return None


def expand_once(
    expr: SExpression, env: Environment, evaluate_fn: Optional[EvaluatorFn] = None
) -> SExpression:
    """Expand only the head-position macro if present.

    Returns `expr` itself (the same object) when it is not a macro call.
    """
    macro = macro_for(expr, env)
    if macro is None:
        return expr

    if evaluate_fn is None:
        evaluate_fn = _default_evaluator()
    outer = macro.env if macro.env is not None else env
    call_env = bind_arguments(macro.bindings, list(expr[1:]), outer)
    expansion = evaluate_fn(macro.body, call_env)
    logger.debug("expanded %s -> %s", to_lisp_string(expr), to_lisp_string(expansion))
    return expansion


def expand_all(
    expr: SExpression, env: Environment, evaluate_fn: Optional[EvaluatorFn] = None
) -> SExpression:
    """Recursively expand every macro call in `expr`.

    Raises SableExpansionError if the configured depth limit is exceeded.
    """
    if evaluate_fn is None:
        evaluate_fn = _default_evaluator()
    limit = env.config.max_expansion_depth
    return _expand_all(expr, env, evaluate_fn, limit, 0)


def _expand_all(
    expr: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    limit: Optional[int],
    depth: int,
) -> SExpression:
    # Expand the head until it no longer names a macro. A rewrite may hand
    # back the very list it was given, so the head is re-checked every time.
    original = expr
    while macro_for(expr, env) is not None:
        expr = expand_once(expr, env, evaluate_fn)
        depth += 1
        if limit is not None and depth > limit:
            raise SableExpansionError(original, limit)

    if not isinstance(expr, list) or not expr:
        return expr

    head = expr[0]
    if head in INERT_FORMS:
        return expr
    if head in PROCEDURE_FORMS and len(expr) > 1:
        return [head, expr[1]] + [_expand_all(x, env, evaluate_fn, limit, depth) for x in expr[2:]]
    if head == LET and len(expr) > 1 and isinstance(expr[1], list):
        bindings = [
            x if i % 2 == 0 else _expand_all(x, env, evaluate_fn, limit, depth)
            for i, x in enumerate(expr[1])
        ]
        return [head, bindings] + [_expand_all(x, env, evaluate_fn, limit, depth) for x in expr[2:]]
    return [_expand_all(x, env, evaluate_fn, limit, depth) for x in expr]
