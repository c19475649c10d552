"""Registry of special forms for the Sable evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before anything else when a list's head is a
Symbol. Handlers take ``(tail, env, evaluate_fn)`` and return a Value or an
EvalFailure.
"""

from sable.types.values import Symbol
from sable.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form, unquote_splice_form
from sable.evaluation.special_forms.if_form import if_form
from sable.evaluation.special_forms.define_form import define_form
from sable.evaluation.special_forms.set_form import set_form
from sable.evaluation.special_forms.begin_form import begin_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquote-splicing"): unquote_splice_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("begin"): begin_form,
}
