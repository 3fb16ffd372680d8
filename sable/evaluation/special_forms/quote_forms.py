"""quote and quasiquote.

Quasiquote builds a mostly-literal copy of its template. Inside it,
`(unquote SYM)` is replaced by SYM's binding and `(splice-unquote SYM)` has
the elements of SYM's (list) binding spliced in place. Substitution is by
symbol lookup only; nothing in the template is evaluated. Nesting depth is
not tracked, so an inner quasiquote is just another list and its unquotes
are substituted too.
"""

from __future__ import annotations

from typing import Optional

from sable import SExpression, LispValue, EvaluatorFn
from sable.types.environment import Environment
from sable.types.errors import SableArityError, SableUnboundSymbol
from sable.types.symbol import Symbol

UNQUOTE = Symbol("unquote")
SPLICE_UNQUOTE = Symbol("splice-unquote")


def _unquote_form(item: list) -> Optional[tuple[Symbol, Symbol]]:
    """Return (marker, name) when `item` is an unquote/splice-unquote of a symbol."""
    if len(item) < 2:
        return None
    marker, name = item[0], item[1]
    if not (isinstance(marker, Symbol) and marker in (UNQUOTE, SPLICE_UNQUOTE)):
        return None
    if not isinstance(name, Symbol):
        return None
    if len(item) > 2:
        raise SableArityError(f"{marker} takes exactly one symbol")
    return marker, name


def _push_element(item: SExpression, env: Environment, results: list) -> None:
    """Push the expansion of one template element onto `results`.

    `results` is built back to front, so spliced elements go on reversed.
    """
    if not isinstance(item, list):
        results.append(item)
        return

    form = _unquote_form(item)
    if form is None:
        results.append(_expand_list(item, env))
        return

    marker, name = form
    if marker == UNQUOTE:
        # Unbound names are tolerated: the element stays literal.
        owner = env.find(name)
        results.append(owner.vars[name] if owner is not None else item)
        return

    # splice-unquote only sees the innermost frame.
    if name not in env.vars:
        raise SableUnboundSymbol(name)
    value = env.vars[name]
    if isinstance(value, list):
        results.extend(reversed(value))


def _expand_list(seq: list, env: Environment) -> list:
    results: list = []
    for item in reversed(seq):
        _push_element(item, env, results)
    results.reverse()
    return results


def quasiquote_expand(template: SExpression, env: Environment) -> SExpression:
    """Expand a quasiquote template against `env`.

    The template itself is never mutated; lists in the result are new.
    """
    if not isinstance(template, list):
        return template

    form = _unquote_form(template)
    if form is None:
        return _expand_list(template, env)

    # A bare `,x` or `,@xs` as the whole template.
    results: list = []
    _push_element(template, env, results)
    if form[0] == SPLICE_UNQUOTE:
        results.reverse()
        return results
    return results[0]


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SableArityError("quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SableArityError("quasiquote expects exactly 1 argument")
    return quasiquote_expand(tail[0], env)
