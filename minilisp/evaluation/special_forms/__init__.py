"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that receive their arguments unevaluated.
The evaluator consults this table before looking at the scope, so these
names can never be shadowed; let/fn refuse them (see reserved.py).
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.arithmetic_forms import add_form, sub_form, mul_form, div_form
from minilisp.evaluation.special_forms.logic_forms import or_form, and_form, not_form
from minilisp.evaluation.special_forms.equality_forms import equals_form, not_equals_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.let_form import let_form
from minilisp.evaluation.special_forms.fn_form import fn_form
from minilisp.evaluation.special_forms.print_form import print_form

SPECIAL_FORMS = {
    Symbol("+"): add_form,
    Symbol("-"): sub_form,
    Symbol("*"): mul_form,
    Symbol("/"): div_form,
    Symbol("or"): or_form,
    Symbol("and"): and_form,
    Symbol("not"): not_form,
    Symbol("="): equals_form,
    Symbol("!="): not_equals_form,
    Symbol("if"): if_form,
    Symbol("let"): let_form,
    Symbol("fn"): fn_form,
    Symbol("print"): print_form,
}
