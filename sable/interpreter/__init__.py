"""Top-level driver: expand then evaluate forms against one environment."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from sable import SExpression, LispValue
from sable.config import EvalConfig
from sable.types.environment import Environment
from sable.types.errors import SableArityError, SableError
from sable.types.printer import to_lisp_string
from sable.reader.parser import read_all, read_one
from sable.evaluation.evaluator import evaluate
from sable.evaluation.macro_expander import expand_all
from sable.builtin.env_builtin import register
from sable.builtin.io_builtin import register as register_io

logger = logging.getLogger(__name__)

Source = Union[str, SExpression]


def default_environment(config: Optional[EvalConfig] = None) -> Environment:
    """Return a fresh top-level environment seeded with every primitive."""
    env = Environment(config=config)
    register(env)
    register_io(env)
    return env


def _expand_and_evaluate(form: SExpression, env: Environment) -> LispValue:
    logger.debug("evaluating %s", to_lisp_string(form))
    try:
        return evaluate(expand_all(form, env), env)
    except SableError as e:
        logger.debug("evaluation of %s failed: %s", to_lisp_string(form), e)
        raise


def evaluate_single(source: Source, env: Environment) -> LispValue:
    """Expand then evaluate one top-level form.

    `source` is either source text holding exactly one form, or an already
    parsed expression tree.
    """
    form = read_one(source) if isinstance(source, str) else source
    return _expand_and_evaluate(form, env)


def evaluate_sequence(forms: Union[str, Iterable[Source]], env: Environment) -> LispValue:
    """Expand and evaluate each form in order against `env`, returning the last result.

    `forms` is either source text (every form in it is read) or an iterable
    whose items are source strings or parsed trees. Definitions made by one
    form are visible to the next; the first error stops the sequence and
    propagates.
    """
    if isinstance(forms, str):
        trees: Iterable[SExpression] = read_all(forms)
    else:
        trees = (
            tree
            for item in forms
            for tree in (read_all(item) if isinstance(item, str) else [item])
        )

    result: LispValue = None
    evaluated = 0
    for tree in trees:
        result = _expand_and_evaluate(tree, env)
        evaluated += 1
    if not evaluated:
        raise SableArityError("evaluate_sequence requires at least one form")
    return result


class Interpreter:
    """
    Maintains one top-level Environment across calls to `eval`.
    """

    def __init__(self, config: Optional[EvalConfig] = None):
        self.env: Environment = default_environment(config)

    def eval(self, code: str) -> LispValue:
        return evaluate_sequence(code, self.env)

    def eval_form(self, form: SExpression) -> LispValue:
        return evaluate_single(form, self.env)
