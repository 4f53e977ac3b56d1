from conslisp import LispValue
from conslisp.errors import LispArityError
from conslisp.types.bind import parse_params
from conslisp.types.builtin import special_form
from conslisp.types.cons_list import List
from conslisp.types.lambda_fn import Lambda
from conslisp.types.scope import Scope


@special_form("lambda")
def lambda_form(tail: List, scope: Scope) -> LispValue:
    # (lambda (params) body...) allows zero or more body forms, run as an
    # implicit progn; an empty body returns Nil.
    if not tail:
        raise LispArityError("lambda requires at least a parameter list")
    return Lambda(parse_params(tail.car), tail.cdr, scope)
