from conslisp import LispValue
from conslisp.types.builtin import special_form
from conslisp.types.cons_list import List
from conslisp.types.scope import Scope


@special_form("progn")
def progn_form(tail: List, scope: Scope) -> LispValue:
    return tail.eval_to_value(scope)
