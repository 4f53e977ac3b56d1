"""Call dispatch for conslisp.

A non-empty List evaluated as a form is a call. The head is evaluated to
obtain the callable, then:

- a Builtin receives the tail evaluated element by element when its
  `evaluate_args` flag is set, and the raw tail otherwise;
- a Lambda receives the raw tail and evaluates it itself before binding;
- anything else is not callable.

The policy travels with the callable value, so rebinding a name from a
procedure to a special form changes how later calls through it behave.
"""

from __future__ import annotations

import logging

from conslisp import LispValue
from conslisp.errors import LispInvalidCall
from conslisp.evaluation.evaluator import evaluate, type_name
from conslisp.types.builtin import Builtin
from conslisp.types.cons_list import List, End
from conslisp.types.lambda_fn import Lambda
from conslisp.types.nil import Nil
from conslisp.types.scope import Scope

log = logging.getLogger(__name__)


def apply(form: List, scope: Scope) -> LispValue:
    """Evaluate `form` as a call in `scope`. The empty form yields Nil."""
    if form is End:
        return Nil

    head = evaluate(form.car, scope)
    tail: List = form.cdr

    if isinstance(head, Builtin):
        if head.evaluate_args:
            tail = tail.eval(scope)
        return head.call(tail, scope)
    if isinstance(head, Lambda):
        return head.call(tail, scope)

    log.debug("invalid call: head %s evaluated to %r", form.car, head)
    raise LispInvalidCall(type_name(head))


def apply_values(fn: LispValue, args: List, scope: Scope) -> LispValue:
    """Apply `fn` to already-evaluated `args`, without evaluating them again."""
    if isinstance(fn, Lambda):
        return fn.apply(args)
    if isinstance(fn, Builtin):
        return fn.call(args, scope)
    raise LispInvalidCall(type_name(fn))
