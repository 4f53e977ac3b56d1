"""Single-value evaluation for conslisp.

Symbols resolve through the Scope, lists are calls (see
conslisp.evaluation.apply), and every other value evaluates to itself.
"""

from __future__ import annotations

import numbers

from conslisp import LispValue, SExpression
from conslisp.types.builtin import Builtin
from conslisp.types.cons_list import List
from conslisp.types.lambda_fn import Lambda
from conslisp.types.nil import NilType
from conslisp.types.scope import Scope
from conslisp.types.symbol import Symbol, QUOTE
from conslisp.errors import LispUnknownSymbol


def type_name(value: LispValue) -> str:
    """Human-readable type tag of `value`, for diagnostics only."""
    match value:
        case NilType():
            return "Nil"
        case bool():
            return type(value).__name__
        case numbers.Number():
            return "Number"
        case Symbol():
            return "Symbol"
        case str():
            return "String"
        case Builtin():
            return "Builtin"
        case Lambda():
            return "Lambda"
        case List():
            return "List"
    return type(value).__name__


def quote(value: LispValue) -> List:
    """Wrap `value` as the form (quote value), which evaluates back to `value`."""
    return List.from_iterable([QUOTE, value])


def evaluate(expr: SExpression, scope: Scope) -> LispValue:
    match expr:
        case Symbol():
            value = scope.get(expr)
            if value is None:
                raise LispUnknownSymbol(expr)
            return value
        case List():
            return expr.call(scope)
    # --- Atoms return as-is ---
    return expr
