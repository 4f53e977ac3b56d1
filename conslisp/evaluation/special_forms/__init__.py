"""Registry of special forms.

Each entry is a Builtin with `evaluate_args` unset, so call dispatch hands it
the raw tail. They are ordinary bindings: `register` installs them in a scope
and user code may shadow or rebind them like any other name.
"""

from conslisp.types.scope import Scope
from conslisp.types.symbol import Symbol
from conslisp.evaluation.special_forms.quote_form import quote_form
from conslisp.evaluation.special_forms.if_form import if_form
from conslisp.evaluation.special_forms.define_form import define_form
from conslisp.evaluation.special_forms.set_form import set_form
from conslisp.evaluation.special_forms.lambda_form import lambda_form
from conslisp.evaluation.special_forms.progn_form import progn_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("lambda"): lambda_form,
    Symbol("progn"): progn_form,
    Symbol("begin"): progn_form,
}


def register(scope: Scope) -> None:
    scope.update(SPECIAL_FORMS)
