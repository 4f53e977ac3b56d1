from conslisp import LispValue
from conslisp.errors import LispArityError
from conslisp.evaluation.evaluator import evaluate
from conslisp.types.builtin import special_form
from conslisp.types.cons_list import List
from conslisp.types.nil import Nil
from conslisp.types.scope import Scope
from conslisp.types.symbol import FALSE


def is_true(value: LispValue) -> bool:
    # Lisp truthiness: anything other than Nil and #f
    return value is not Nil and value != FALSE


@special_form("if")
def if_form(tail: List, scope: Scope) -> LispValue:
    """(if test then [else]); without an else branch a false test yields Nil."""
    forms = list(tail)
    if len(forms) not in (2, 3):
        raise LispArityError("if requires a condition, a then-expression and an optional else-expression")

    if is_true(evaluate(forms[0], scope)):
        return evaluate(forms[1], scope)
    elif len(forms) == 3:
        return evaluate(forms[2], scope)
    return Nil
