from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.errors import SableArityError
from sable.types.expr_type import Type, expect
from sable.types.environment import Environment


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let (name1 value1 name2 value2 ...) body)

    Pairs are processed left to right in a fresh child scope: each value is
    evaluated and bound before the next pair, so later values can refer to
    earlier names.
    """
    if len(tail) != 2:
        raise SableArityError("let requires exactly a binding list and a body")

    bindings, body = tail
    expect(Type.LIST, bindings)
    if len(bindings) % 2 != 0:
        raise SableArityError("let bindings must be symbol/value pairs")

    local_env = Environment.child_of(env)
    for i in range(0, len(bindings), 2):
        name = expect(Type.SYMBOL, bindings[i])
        local_env.define(name, evaluate_fn(bindings[i + 1], local_env))

    return evaluate_fn(body, local_env)
