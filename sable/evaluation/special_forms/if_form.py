from sable import EvaluatorFn
from sable import SExpression, LispValue
from sable.types.errors import SableArityError, SableTypeError
from sable.types.expr_type import Type
from sable.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise SableArityError("if requires a test, a consequent and an alternative")

    test, consequent, alternative = tail
    cond = evaluate_fn(test, env)
    # No truthiness: the test must produce a Bool.
    if cond is True:
        return evaluate_fn(consequent, env)
    if cond is False:
        return evaluate_fn(alternative, env)
    raise SableTypeError(Type.BOOL, cond)
