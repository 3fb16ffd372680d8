import pytest

from sable.types.errors import (
    SableArityError,
    SableTypeError,
    SableUnboundSymbol,
)
from sable.types.expr_type import Type
from sable.types.lambda_fn import Lambda, Macro
from sable.types.symbol import Symbol


# ------------------ def ------------------

def test_def_returns_symbol_and_binds(run, env):
    assert run("(def x (+ 2 3))") == Symbol("x")
    assert env.lookup(Symbol("x")) == 5


def test_def_arity(run):
    with pytest.raises(SableArityError):
        run("(def x)")
    with pytest.raises(SableArityError):
        run("(def x 1 2)")


def test_def_requires_symbol(run):
    with pytest.raises(SableTypeError) as exc:
        run('(def "x" 1)')
    assert exc.value.expected is Type.SYMBOL


def test_def_inside_do_stays_local(run, env):
    run("(do (def inner 1) inner)")
    assert env.get(Symbol("inner")) is None


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if (< 1 2) \"yes\" \"no\")", "yes"),
        ("(if (not true) 1 (+ 1 1))", 2),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_never_evaluates_untaken_branch(run):
    assert run("(if true 1 undefined-symbol)") == 1
    assert run("(if false undefined-symbol 2)") == 2


def test_if_requires_bool_test(run):
    with pytest.raises(SableTypeError) as exc:
        run("(if 1 2 3)")
    assert exc.value.expected is Type.BOOL
    assert exc.value.actual == 1


def test_if_requires_three_arguments(run):
    with pytest.raises(SableArityError):
        run("(if true 1)")
    with pytest.raises(SableArityError):
        run("(if true 1 2 3)")


# ------------------ fn / macro ------------------

def test_fn_builds_lambda_without_evaluating(run):
    lam = run("(fn (a b) (undefined a b))")
    assert isinstance(lam, Lambda) and not isinstance(lam, Macro)
    assert lam.bindings == [Symbol("a"), Symbol("b")]
    assert lam.body == [Symbol("undefined"), Symbol("a"), Symbol("b")]


def test_fn_call(run):
    assert run("((fn (a) (+ a 1)) 41)") == 42


def test_fn_with_extra_argument_is_arity_error(run):
    with pytest.raises(SableArityError):
        run("(fn (a) (+ a 1) extra)")
    with pytest.raises(SableArityError):
        run("(fn (a))")


def test_macro_builds_macro(run):
    mac = run("(macro (x) x)")
    assert isinstance(mac, Macro)
    with pytest.raises(SableArityError):
        run("(macro (x))")


def test_recursive_function(run):
    source = """
    (def fact (fn (n) (if (<= n 1) 1 (* n (fact (- n 1))))))
    (fact 10)
    """
    assert run(source) == 3628800


# ------------------ let ------------------

def test_let_binds_sequentially(run):
    assert run("(let (a 1 b (+ a 1) c (* b 10)) (+ a b c))") == 23


def test_let_shadowing(run):
    assert run("(let (s 1) (let (s 2) s))") == 2
    assert run("(let (s 1) (do (let (s 2) s) s))") == 1


def test_let_scope_is_dropped(run, env):
    run("(let (tmp 1) tmp)")
    assert env.get(Symbol("tmp")) is None


def test_let_errors(run):
    with pytest.raises(SableArityError):
        run("(let (a 1))")
    with pytest.raises(SableArityError):
        run("(let (a) a)")
    with pytest.raises(SableTypeError) as exc:
        run("(let a a)")
    assert exc.value.expected is Type.LIST
    with pytest.raises(SableTypeError) as exc:
        run("(let (1 2) 3)")
    assert exc.value.expected is Type.SYMBOL


# ------------------ do ------------------

def test_do_returns_last(run, out):
    assert run('(do (print "a") (print "b") 3)') == 3
    assert out.getvalue() == "ab"


def test_do_requires_a_form(run):
    with pytest.raises(SableArityError):
        run("(do)")


def test_do_stops_at_first_error(run, out):
    with pytest.raises(SableUnboundSymbol):
        run('(do (print "a") missing (print "b"))')
    assert out.getvalue() == "a"


# ------------------ quote ------------------

def test_quote(run):
    assert run("(quote (1 2 three))") == [1, 2, Symbol("three")]
    assert run("'sym") == Symbol("sym")
    with pytest.raises(SableArityError):
        run("(quote 1 2)")
