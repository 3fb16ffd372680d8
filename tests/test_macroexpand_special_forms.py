import pytest

from sable.types.errors import SableArityError
from sable.types.symbol import Symbol

MACROS = """
(def inc (macro (x) `(+ ,x 1)))
(def wrapinc (macro (x) `(inc ,x)))
"""


def test_m_expand1_simple(run):
    assert run(MACROS + "(m-expand1 (inc 5))") == [Symbol("+"), 5, 1]


def test_m_expand1_single_step(run):
    assert run(MACROS + "(m-expand1 (wrapinc 5))") == [Symbol("inc"), 5]


def test_m_expand_full_nested(run):
    assert run(MACROS + "(m-expand (list (wrapinc 5) (wrapinc 6)))") == [
        Symbol("list"),
        [Symbol("+"), 5, 1],
        [Symbol("+"), 6, 1],
    ]


def test_m_expand_does_not_evaluate(run):
    assert run(MACROS + "(m-expand (undefined (inc 1)))") == [
        Symbol("undefined"),
        [Symbol("+"), 1, 1],
    ]


def test_m_expand1_of_non_macro_form(run):
    assert run("(m-expand1 (+ 1 2))") == [Symbol("+"), 1, 2]


def test_macroexpand_arity(run):
    with pytest.raises(SableArityError):
        run("(m-expand1)")
    with pytest.raises(SableArityError):
        run("(m-expand 1 2)")
