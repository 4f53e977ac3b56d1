from conslisp import LispValue
from conslisp.errors import LispArityError
from conslisp.types.builtin import special_form
from conslisp.types.cons_list import List
from conslisp.types.scope import Scope


@special_form("quote")
def quote_form(tail: List, scope: Scope) -> LispValue:
    """(quote datum) -> datum, unevaluated."""
    if len(tail) != 1:
        raise LispArityError("quote expects exactly 1 argument")
    return tail.car
