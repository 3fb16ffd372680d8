"""Core evaluator for the Sable interpreter.

Implements special-form dispatch and procedure application by direct
recursion over the expression tree. Macro expansion is not performed here:
callers run `expand_all` on a form before handing it to `evaluate`.
"""

from __future__ import annotations

from sable import SExpression, LispValue
from sable.types.environment import Environment
from sable.types.errors import SableMalformedList, SableTypeError
from sable.types.lambda_fn import Lambda
from sable.types.native import NativeProcedure
from sable.types.symbol import Symbol
from sable.evaluation.apply import apply
from sable.evaluation.special_forms import SPECIAL_FORMS


# Macro is a Lambda subclass, so it is covered here as well.
SELF_EVALUATING = (bool, int, float, str, NativeProcedure, Lambda)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate a single expression in `env`."""
    if isinstance(expr, Symbol):
        return env.lookup(expr)

    if isinstance(expr, list):
        if not expr:
            raise SableMalformedList(expr)
        head, *tail_args = expr
        # Special forms receive their arguments unevaluated.
        if isinstance(head, Symbol) and head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)
        fn = evaluate(head, env)
        return apply(fn, tail_args, env, evaluate, expr)

    # --- Atoms return as-is ---
    if isinstance(expr, SELF_EVALUATING):
        return expr

    raise SableTypeError(None, expr)
