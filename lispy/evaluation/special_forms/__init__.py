"""Registry of special forms for the Lispy evaluator.

Maps reserved Symbols to handler functions that implement non-standard
evaluation rules. The evaluator consults this table once per compound
expression, before ordinary function application, so these keywords can
never be shadowed by a binding.
"""

from types import MappingProxyType

from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.quote_form import quote_form
from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.define_form import define_form
from lispy.evaluation.special_forms.set_form import set_form
from lispy.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = MappingProxyType({
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
})


def is_keyword(name: Symbol) -> bool:
    return name in SPECIAL_FORMS
