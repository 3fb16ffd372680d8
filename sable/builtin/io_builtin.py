"""Side-effecting primitives: console output, line input and timing.

These take their argument forms unevaluated, like every native procedure,
and write to the streams configured on the root environment.
"""

from __future__ import annotations

import logging
import time

from sable import LispValue, SExpression
from sable.types.environment import Environment
from sable.types.errors import SableArityError
from sable.types.expr_type import Type, expect
from sable.types.native import NativeProcedure
from sable.types.printer import to_lisp_string
from sable.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _evaluate(form: SExpression, env: Environment) -> LispValue:
    from sable.evaluation.evaluator import evaluate
    return evaluate(form, env)


def _single(name: str, arg_forms: list[SExpression]) -> SExpression:
    if len(arg_forms) != 1:
        raise SableArityError(f"{name} requires exactly 1 argument")
    return arg_forms[0]


def print_form(arg_forms: list[SExpression], env: Environment) -> LispValue:
    result = _evaluate(_single("print", arg_forms), env)
    out = env.config.output_stream
    out.write(to_lisp_string(result, readable=False))
    out.flush()
    return result


def println_form(arg_forms: list[SExpression], env: Environment) -> LispValue:
    result = _evaluate(_single("println", arg_forms), env)
    env.config.output_stream.write(to_lisp_string(result, readable=False) + "\n")
    return result


def dbg_form(arg_forms: list[SExpression], env: Environment) -> LispValue:
    form = _single("dbg", arg_forms)
    result = _evaluate(form, env)
    logger.debug("dbg %s = %r", to_lisp_string(form), result)
    env.config.output_stream.write(f"[dbg] {to_lisp_string(form)} = {to_lisp_string(result)}\n")
    return result


def readline_form(arg_forms: list[SExpression], env: Environment) -> LispValue:
    """(readline [prompt]): write the optional prompt, return one line without its newline."""
    if len(arg_forms) > 1:
        raise SableArityError("readline takes at most 1 argument")
    config = env.config
    if arg_forms:
        prompt = expect(Type.STRING, _evaluate(arg_forms[0], env))
        config.output_stream.write(prompt)
        config.output_stream.flush()
    line = config.input_stream.readline()
    return line.rstrip("\r\n")


def time_form(arg_forms: list[SExpression], env: Environment) -> LispValue:
    form = _single("time", arg_forms)
    start = time.perf_counter()
    result = _evaluate(form, env)
    elapsed = time.perf_counter() - start
    env.config.output_stream.write(f"Eval time for expr: {to_lisp_string(form)} = {elapsed:.6f}s\n")
    return result


IO_PRIMITIVES = {
    "print": print_form,
    "println": println_form,
    "dbg": dbg_form,
    "readline": readline_form,
    "time": time_form,
}


def register(env: Environment):
    env.update({Symbol(name): NativeProcedure(name, fn) for name, fn in IO_PRIMITIVES.items()})
