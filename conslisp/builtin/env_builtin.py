"""Built-in procedures for the conslisp runtime scope.

This module defines core arithmetic, comparison, list processing, predicates
and application helpers, plus the registration utilities that install them
(and the special forms) into a Scope. Every procedure receives its arguments
already evaluated, as a List.
"""
from __future__ import annotations

import numbers
from functools import reduce

from conslisp import LispValue
from conslisp.errors import LispArityError, LispTypeError
from conslisp.evaluation import special_forms
from conslisp.evaluation.apply import apply_values
from conslisp.evaluation.evaluator import evaluate, type_name
from conslisp.types.builtin import Builtin, procedure
from conslisp.types.cons_list import List, End, Cons
from conslisp.types.lambda_fn import Lambda
from conslisp.types.nil import Nil
from conslisp.types.scope import Scope
from conslisp.types.symbol import Symbol, TRUE, FALSE


def _bool(value: bool) -> Symbol:
    return TRUE if value else FALSE


def _exactly(args: List, n: int, name: str) -> list[LispValue]:
    values = list(args)
    if len(values) != n:
        raise LispArityError(f"{name} requires exactly {n} argument(s), got {len(values)}")
    return values


def _numbers(args: List, name: str) -> list[numbers.Number]:
    values = list(args)
    for v in values:
        if isinstance(v, bool) or not isinstance(v, numbers.Number):
            raise LispTypeError(f"All arguments to {name} must be numbers, got {type_name(v)}")
    return values


def _list_arg(value: LispValue, name: str) -> List:
    if not isinstance(value, List):
        raise LispTypeError(f"{name} expects a list, got {type_name(value)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
@procedure("+")
def add(args: List, scope: Scope) -> LispValue:
    return sum(_numbers(args, "+"))


@procedure("-")
def sub(args: List, scope: Scope) -> LispValue:
    values = _numbers(args, "-")
    if not values:
        raise LispArityError("- requires at least 1 argument")
    if len(values) == 1:
        return -values[0]
    return reduce(lambda a, b: a - b, values)


@procedure("*")
def mul(args: List, scope: Scope) -> LispValue:
    return reduce(lambda a, b: a * b, _numbers(args, "*"), 1)


@procedure("/")
def div(args: List, scope: Scope) -> LispValue:
    # ZeroDivisionError propagates unchanged
    values = _numbers(args, "/")
    if not values:
        raise LispArityError("/ requires at least 1 argument")
    if len(values) == 1:
        return 1 / values[0]
    return reduce(lambda a, b: a / b, values)


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, test):
    def compare(args: List, scope: Scope) -> Symbol:
        values = _numbers(args, name)
        return _bool(all(test(a, b) for a, b in zip(values, values[1:])))
    return Builtin(name, compare)


num_eq = _chain("=", lambda a, b: a == b)
lt = _chain("<", lambda a, b: a < b)
gt = _chain(">", lambda a, b: a > b)
lte = _chain("<=", lambda a, b: a <= b)
gte = _chain(">=", lambda a, b: a >= b)


@procedure("equal?")
def is_equal(args: List, scope: Scope) -> Symbol:
    """Structural equality; lists compare element by element."""
    a, b = _exactly(args, 2, "equal?")
    return _bool(a == b)


@procedure("eq?")
def is_eq(args: List, scope: Scope) -> Symbol:
    """Identity for lists and procedures, value equality for atoms."""
    a, b = _exactly(args, 2, "eq?")
    if isinstance(a, (Cons, Builtin, Lambda)) or isinstance(b, (Cons, Builtin, Lambda)):
        return _bool(a is b)
    return _bool(type_name(a) == type_name(b) and a == b)


@procedure("not")
def logical_not(args: List, scope: Scope) -> Symbol:
    (value,) = _exactly(args, 1, "not")
    return _bool(value is Nil or value == FALSE)


# -------------------------------
# List operations
# -------------------------------
@procedure("cons")
def cons(args: List, scope: Scope) -> List:
    head, tail = _exactly(args, 2, "cons")
    if tail is Nil:
        tail = End
    return List.cons(head, _list_arg(tail, "cons"))


@procedure("car")
def car(args: List, scope: Scope) -> LispValue:
    (lst,) = _exactly(args, 1, "car")
    lst = _list_arg(lst, "car")
    return Nil if lst is End else lst.car


@procedure("cdr")
def cdr(args: List, scope: Scope) -> List:
    (lst,) = _exactly(args, 1, "cdr")
    lst = _list_arg(lst, "cdr")
    return End if lst is End else lst.cdr


@procedure("list")
def list_builtin(args: List, scope: Scope) -> List:
    # The evaluated tail already is the fresh list
    return args


@procedure("length")
def length(args: List, scope: Scope) -> int:
    (lst,) = _exactly(args, 1, "length")
    return len(_list_arg(lst, "length"))


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test):
    def check(args: List, scope: Scope) -> Symbol:
        (value,) = _exactly(args, 1, name)
        return _bool(test(value))
    return Builtin(name, check)


is_null = _predicate("null?", lambda v: v is End or v is Nil)
is_symbol = _predicate("symbol?", lambda v: isinstance(v, Symbol))
is_number = _predicate("number?", lambda v: type_name(v) == "Number")
is_string = _predicate("string?", lambda v: isinstance(v, str))
is_list = _predicate("list?", lambda v: isinstance(v, List))
is_procedure = _predicate("procedure?", lambda v: isinstance(v, (Builtin, Lambda)))


@procedure("type-of")
def type_of(args: List, scope: Scope) -> str:
    (value,) = _exactly(args, 1, "type-of")
    return type_name(value)


# -------------------------------
# Evaluation and application
# -------------------------------
@procedure("eval")
def eval_builtin(args: List, scope: Scope) -> LispValue:
    """(eval form): evaluate an already-evaluated form once more."""
    (form,) = _exactly(args, 1, "eval")
    return evaluate(form, scope)


@procedure("apply")
def apply_builtin(args: List, scope: Scope) -> LispValue:
    """(apply f args): call f with the elements of args, which are not evaluated again."""
    fn, fn_args = _exactly(args, 2, "apply")
    return apply_values(fn, _list_arg(fn_args, "apply"), scope)


# -------------------------------
# Registration
# -------------------------------
PROCEDURES = [
    add, sub, mul, div,
    num_eq, lt, gt, lte, gte,
    is_equal, is_eq, logical_not,
    cons, car, cdr, list_builtin, length,
    is_null, is_symbol, is_number, is_string, is_list, is_procedure,
    type_of, eval_builtin, apply_builtin,
]


def register(scope: Scope) -> None:
    """Install the truth symbols, special forms and standard procedures into `scope`."""
    scope.update({
        TRUE: TRUE,
        FALSE: FALSE,
        Symbol("nil"): Nil,
    })
    special_forms.register(scope)
    scope.update({Symbol(p.name): p for p in PROCEDURES})


def standard_scope() -> Scope:
    """Return a fresh global scope with every builtin registered."""
    scope = Scope()
    register(scope)
    return scope
