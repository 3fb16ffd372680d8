"""Error hierarchy for Sable.

Every failure the evaluator can report is a subclass of `SableError`. Errors
are terminal for the form being evaluated: they propagate out of every
recursive evaluation step and are never used for control flow inside the
language itself.
"""

from __future__ import annotations

from typing import Any, Optional

from sable.types.printer import to_lisp_string


class SableError(Exception):
    """ Base class for all Sable errors"""
    pass


class SableTypeError(SableError):
    """ Raised when a value's type disagrees with what a form or primitive requires"""

    def __init__(self, expected: Optional[Any], actual: Any):
        self.expected = expected
        self.actual = actual
        expected_name = expected.name if expected is not None else "a Sable value"
        super().__init__(
            f"Type Mismatch, expected: {expected_name}, got: {to_lisp_string(actual)}"
        )


class SableUnboundSymbol(SableError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"Could not find symbol {str(name)!r} in environment")


class SableMalformedList(SableError):
    """ Raised when a list form does not match any evaluable shape"""

    def __init__(self, forms: list):
        self.forms = forms
        super().__init__(f"Could not eval list '{to_lisp_string(forms)}' in environment")


class SableArityError(SableError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""


class SableExpansionError(SableError):
    """ Raised when macro expansion does not reach a fixed point within the depth limit"""

    def __init__(self, form: Any, depth: int):
        self.form = form
        self.depth = depth
        super().__init__(
            f"Macro expansion exceeded depth {depth} while expanding {to_lisp_string(form)}"
        )


class SableDivisionByZero(SableError):
    """ Raised when a division primitive receives a zero divisor"""


class SableSyntaxError(SableError):
    """ Raised by the reader when source text cannot be parsed"""
