from conslisp import LispValue
from conslisp.errors import LispArityError, LispInvalidSymbol
from conslisp.evaluation.evaluator import evaluate
from conslisp.types.bind import parse_params
from conslisp.types.builtin import special_form
from conslisp.types.cons_list import List, Cons
from conslisp.types.lambda_fn import Lambda
from conslisp.types.scope import Scope
from conslisp.types.symbol import Symbol


@special_form("define")
def define_form(tail: List, scope: Scope) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  shorthand for binding a named lambda

    Binds in the current scope and returns the bound symbol.
    """
    if not tail:
        raise LispArityError("define requires a name")

    target = tail.car
    if isinstance(target, Cons):
        name = target.car
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"Cannot define {name!r} as a symbol")
        value = Lambda(parse_params(target.cdr), tail.cdr, scope, name=str(name))
        scope.define(name, value)
        return name

    if len(tail) != 2:
        raise LispArityError("define requires exactly 2 arguments")
    if not isinstance(target, Symbol):
        raise LispInvalidSymbol(f"Cannot define {target!r} as a symbol")
    value = evaluate(tail.cdr.car, scope)
    scope.define(target, value)
    return target
