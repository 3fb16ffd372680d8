from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.errors import SableArityError
from sable.types.expr_type import Type, expect
from sable.types.environment import Environment


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds name in the current frame only and returns the name itself.
    """
    if len(tail) != 2:
        raise SableArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    expect(Type.SYMBOL, name)
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return name
