"""Registry of special forms for the Sable evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application. Every handler has the signature
`(tail, env, evaluate_fn)` where `tail` holds the unevaluated arguments.
"""

from sable.types.symbol import Symbol
from sable.evaluation.special_forms.def_form import def_form
from sable.evaluation.special_forms.if_form import if_form
from sable.evaluation.special_forms.lambda_form import fn_form, macro_form
from sable.evaluation.special_forms.let_form import let_form
from sable.evaluation.special_forms.do_form import do_form
from sable.evaluation.special_forms.quote_forms import quote_form, quasiquote_form
from sable.evaluation.special_forms.macroexpand_forms import macroexpand1_form, macroexpand_form

SPECIAL_FORMS = {
    Symbol("def"): def_form,
    Symbol("if"): if_form,
    Symbol("fn"): fn_form,
    Symbol("macro"): macro_form,
    Symbol("let"): let_form,
    Symbol("do"): do_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("m-expand1"): macroexpand1_form,
    Symbol("m-expand"): macroexpand_form,
}
