"""Lambda function representation for conslisp."""

from __future__ import annotations

import logging
from io import StringIO

from conslisp import LispValue
from conslisp.types.bind import ParamSpec, bind_arguments
from conslisp.types.cons_list import List, format_value
from conslisp.types.scope import Scope

log = logging.getLogger(__name__)


class Lambda:
    """A first-class procedure with a parameter list, a body and a closure scope.

    The body is a List of forms evaluated in order; the last one gives the
    result (Nil for an empty body).
    """

    __slots__ = ("params", "body", "scope", "name")

    def __init__(self, params: ParamSpec, body: List, scope: Scope, name: str | None = None):
        self.params: ParamSpec = params
        self.body: List = body
        self.scope: Scope = scope
        self.name: str | None = name

    def call(self, tail: List, scope: Scope) -> LispValue:
        """Evaluate `tail` in the caller's scope, then apply to the results."""
        return self.apply(tail.eval(scope))

    def apply(self, args: List) -> LispValue:
        """Bind already-evaluated `args` in a new scope over the closure and run the body."""
        log.debug("apply %s to %s", self.name or "lambda", args)
        local_scope = bind_arguments(self.params, args, self.scope)
        return self.body.eval_to_value(local_scope)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(λ ")
            buffer.write(str(self.params))
            for form in self.body:
                buffer.write(" ")
                buffer.write(format_value(form))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        if self.name:
            return f"#<lambda {self.name}>"
        return str(self)
