"""Special forms that expose the macro expander to Lisp code.

m-expand1: expand a single step at the head position if it is a macro.
m-expand:  fully expand a form, repeatedly expanding head positions to a
           fixed point and recursively expanding subforms.

Both return the expansion as an S-expression and do not evaluate it. The
argument is not evaluated either, and the top-level expander leaves the
argument of these forms alone so there is still something to inspect.
"""

from sable import SExpression, EvaluatorFn
from sable.types.environment import Environment
from sable.types.errors import SableArityError
from sable.evaluation.macro_expander import expand_once, expand_all


def macroexpand1_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
):
    """(m-expand1 form): expand the head macro once and return the result."""
    if len(tail) != 1:
        raise SableArityError("m-expand1 expects exactly 1 argument")
    return expand_once(tail[0], env, evaluate_fn)


def macroexpand_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
):
    """(m-expand form): fully expand a form and return the expansion."""
    if len(tail) != 1:
        raise SableArityError("m-expand expects exactly 1 argument")
    return expand_all(tail[0], env, evaluate_fn)
