from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.errors import SableArityError
from sable.types.environment import Environment


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise SableArityError("do requires at least one form")

    local_env = Environment.child_of(env)
    for e in tail[:-1]:
        evaluate_fn(e, local_env)
    return evaluate_fn(tail[-1], local_env)
