from __future__ import annotations

from typing import NamedTuple

from conslisp import LispValue, SExpression
from conslisp.errors import LispArityError, LispInvalidSymbol
from conslisp.types.cons_list import List, End
from conslisp.types.nil import Nil
from conslisp.types.scope import Scope
from conslisp.types.symbol import Symbol

OPTIONAL = Symbol("&optional")
REST = Symbol("&rest")


class ParamSpec(NamedTuple):
    """A parsed lambda list."""
    required: tuple[Symbol, ...]
    optional: tuple[tuple[Symbol, SExpression], ...]
    rest: Symbol | None

    def __str__(self) -> str:
        parts = [str(s) for s in self.required]
        if self.optional:
            parts.append(str(OPTIONAL))
            for name, default in self.optional:
                parts.append(str(name) if default is Nil else f"({name} {default})")
        if self.rest is not None:
            parts.extend([str(REST), str(self.rest)])
        return f"({' '.join(parts)})"


def parse_params(params: LispValue) -> ParamSpec:
    """
    Validate a lambda list and split it into its sections.

    Supports:
    - Positional required parameters
    - &optional name or (name default); default is Nil when omitted
    - &rest name capturing the remaining arguments as a List

    Raises LispInvalidSymbol for anything that is not a usable parameter name
    and LispArityError for a malformed list.
    """
    if params is Nil:
        params = End
    if not isinstance(params, List):
        raise LispInvalidSymbol(f"Parameter list must be a list, got {params!r}")

    required: list[Symbol] = []
    optional: list[tuple[Symbol, SExpression]] = []
    rest: Symbol | None = None
    section = "required"
    items = list(params)

    while items:
        item = items.pop(0)
        if item == OPTIONAL:
            if section != "required":
                raise LispArityError("Malformed parameter list: misplaced &optional")
            section = "optional"
            continue
        if item == REST:
            if len(items) != 1:
                raise LispArityError("Malformed parameter list: &rest must be followed by exactly one name")
            rest = _param_name(items.pop(0))
            break
        if section == "optional" and isinstance(item, List) and item:
            spec = list(item)
            if len(spec) > 2:
                raise LispArityError(f"Malformed optional parameter {item}")
            optional.append((_param_name(spec[0]), spec[1] if len(spec) == 2 else Nil))
        elif section == "optional":
            optional.append((_param_name(item), Nil))
        else:
            required.append(_param_name(item))

    names = required + [name for name, _ in optional] + ([rest] if rest is not None else [])
    if len(set(names)) != len(names):
        raise LispArityError(f"Duplicate parameter name in {params}")
    return ParamSpec(tuple(required), tuple(optional), rest)


def _param_name(item: LispValue) -> Symbol:
    if not isinstance(item, Symbol) or item in (OPTIONAL, REST):
        raise LispInvalidSymbol(f"Invalid parameter name {item!r}")
    return item


def bind_arguments(spec: ParamSpec, args: List, closure_scope: Scope) -> Scope:
    """
    Bind evaluated `args` to the parameters in `spec`.

    Returns a new Scope whose outer is `closure_scope`. Defaults of missing
    optionals are evaluated in that new scope, so they can refer to earlier
    parameters.
    """
    from conslisp.evaluation.evaluator import evaluate

    supplied = list(args)
    local_scope = Scope(outer=closure_scope)

    if len(supplied) < len(spec.required):
        missing = spec.required[len(supplied):]
        raise LispArityError(
            f"Too few arguments; missing {len(missing)} parameter(s): {[str(s) for s in missing]}"
        )
    for name in spec.required:
        local_scope.define(name, supplied.pop(0))

    for name, default in spec.optional:
        if supplied:
            local_scope.define(name, supplied.pop(0))
        else:
            local_scope.define(name, evaluate(default, local_scope))

    if spec.rest is not None:
        local_scope.define(spec.rest, List.from_iterable(supplied))
    elif supplied:
        raise LispArityError(f"Too many arguments: {List.from_iterable(supplied)}")

    return local_scope
