import pytest

from sable.evaluation.evaluator import evaluate
from sable.evaluation.special_forms.quote_forms import quasiquote_expand
from sable.types.environment import Environment
from sable.types.errors import SableArityError, SableUnboundSymbol
from sable.types.symbol import Symbol

QQ = Symbol("quasiquote")
UQ = Symbol("unquote")
SPLICE = Symbol("splice-unquote")


def test_quasiquote_simple(env):
    expr = [QQ, [1, 2, 3]]
    assert evaluate(expr, env) == [1, 2, 3]


def test_quasiquote_plain_data_is_unchanged_and_not_aliased(env):
    template = [1, [Symbol("a"), "s"], [[2.5]], True]
    result = evaluate([QQ, template], env)
    assert result == template
    assert result is not template
    assert template == [1, [Symbol("a"), "s"], [[2.5]], True]


def test_quasiquote_atom(env):
    assert evaluate([QQ, 5], env) == 5
    assert evaluate([QQ, Symbol("x")], env) == Symbol("x")


def test_quasiquote_with_unquote(env):
    env.define(Symbol("x"), 2)
    expr = [QQ, [1, [UQ, Symbol("x")], 3]]
    assert evaluate(expr, env) == [1, 2, 3]


def test_unquote_of_unbound_symbol_is_left_literal(env):
    expr = [QQ, [1, [UQ, Symbol("nope")]]]
    assert evaluate(expr, env) == [1, [UQ, Symbol("nope")]]


def test_unquote_does_not_evaluate_expressions(env):
    # Only a symbol payload is substituted.
    expr = [QQ, [[UQ, [Symbol("+"), 1, 2]]]]
    assert evaluate(expr, env) == [[UQ, [Symbol("+"), 1, 2]]]


def test_unquote_finds_outer_bindings(env):
    env.define(Symbol("x"), "outer")
    inner = Environment.child_of(env)
    assert quasiquote_expand([[UQ, Symbol("x")]], inner) == ["outer"]


def test_splice_order(run):
    assert run("(let (lst '(2 3)) `(1 ,@lst 4))") == [1, 2, 3, 4]


def test_splice_at_ends_and_nested(env):
    env.define(Symbol("xs"), [1, 2])
    expr = [QQ, [[SPLICE, Symbol("xs")], [0, [SPLICE, Symbol("xs")]], [SPLICE, Symbol("xs")]]]
    assert evaluate(expr, env) == [1, 2, [0, 1, 2], 1, 2]


def test_splice_of_empty_list(env):
    env.define(Symbol("xs"), [])
    assert evaluate([QQ, [1, [SPLICE, Symbol("xs")], 2]], env) == [1, 2]


def test_splice_requires_binding_in_current_frame(env):
    env.define(Symbol("xs"), [1, 2])
    inner = Environment.child_of(env)
    with pytest.raises(SableUnboundSymbol):
        quasiquote_expand([[SPLICE, Symbol("xs")]], inner)
    with pytest.raises(SableUnboundSymbol):
        quasiquote_expand([[SPLICE, Symbol("missing")]], env)


def test_splice_of_non_list_emits_nothing(env):
    env.define(Symbol("n"), 5)
    assert evaluate([QQ, [1, [SPLICE, Symbol("n")], 2]], env) == [1, 2]


def test_extra_payload_is_arity_error(env):
    env.define(Symbol("x"), 1)
    with pytest.raises(SableArityError):
        evaluate([QQ, [[UQ, Symbol("x"), Symbol("x")]]], env)
    with pytest.raises(SableArityError):
        evaluate([QQ, [[SPLICE, Symbol("x"), 2]]], env)


def test_nested_quasiquote_substitutes_at_every_level(env):
    env.define(Symbol("x"), 7)
    expr = [QQ, [1, [QQ, [2, [UQ, Symbol("x")]]]]]
    assert evaluate(expr, env) == [1, [QQ, [2, 7]]]


def test_bare_unquote_template(env):
    env.define(Symbol("x"), [1, 2])
    assert evaluate([QQ, [UQ, Symbol("x")]], env) == [1, 2]
    assert evaluate([QQ, [SPLICE, Symbol("x")]], env) == [1, 2]


def test_quasiquote_arity(env):
    with pytest.raises(SableArityError):
        evaluate([QQ], env)
    with pytest.raises(SableArityError):
        evaluate([QQ, 1, 2], env)


def test_reader_shorthand(run):
    assert run("(def y 10) `(a ,y)") == [Symbol("a"), 10]
