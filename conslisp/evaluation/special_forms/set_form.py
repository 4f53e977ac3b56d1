from conslisp import LispValue
from conslisp.errors import LispArityError, LispInvalidSymbol
from conslisp.evaluation.evaluator import evaluate
from conslisp.types.builtin import special_form
from conslisp.types.cons_list import List
from conslisp.types.scope import Scope
from conslisp.types.symbol import Symbol


@special_form("set!")
def set_form(tail: List, scope: Scope) -> LispValue:
    if len(tail) != 2:
        raise LispArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate(val_expr, scope)
    scope.set(var_sym, value)
    return value
