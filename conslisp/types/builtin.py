"""Native callables exposed to Lisp code."""

from __future__ import annotations

from typing import Callable

from conslisp import LispValue, NativeFn


class Builtin:
    """A native function plus its evaluation policy.

    With `evaluate_args` set, the tail of a call is evaluated element by
    element before `fn` sees it (an ordinary procedure). Without it, `fn`
    receives the raw tail and decides itself what to evaluate (a special
    form such as `quote` or `if`). Either way `fn` is called as
    ``fn(tail, scope)``.
    """

    __slots__ = ("name", "fn", "evaluate_args")

    def __init__(self, name: str, fn: NativeFn, evaluate_args: bool = True):
        self.name = name
        self.fn = fn
        self.evaluate_args = evaluate_args

    @property
    def is_special_form(self) -> bool:
        return not self.evaluate_args

    def call(self, tail, scope) -> LispValue:
        return self.fn(tail, scope)

    def __repr__(self) -> str:
        kind = "builtin" if self.evaluate_args else "special-form"
        return f"#<{kind} {self.name}>"


def procedure(name: str) -> Callable[[NativeFn], Builtin]:
    """Decorator: wrap `fn` as a Builtin that receives evaluated arguments."""
    def wrap(fn: NativeFn) -> Builtin:
        return Builtin(name, fn, evaluate_args=True)
    return wrap


def special_form(name: str) -> Callable[[NativeFn], Builtin]:
    """Decorator: wrap `fn` as a Builtin that receives its tail unevaluated."""
    def wrap(fn: NativeFn) -> Builtin:
        return Builtin(name, fn, evaluate_args=False)
    return wrap
