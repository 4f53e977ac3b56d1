"""Runtime environment for conslisp.

A Scope stores bindings of Symbols to evaluated values and supports nested
scopes via an `outer` link. Lambda application and `define` mutate scopes in
place; lookups walk the chain from the innermost frame outwards.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Mapping, Optional

from conslisp import LispValue
from conslisp.errors import LispInvalidSymbol, LispUnknownSymbol
from conslisp.types.symbol import Symbol

log = logging.getLogger(__name__)


class Scope:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Scope] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Scope | None = outer

    def child(self) -> Scope:
        """Return a new, empty scope chained to this one."""
        return Scope(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame.

        Raises LispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispInvalidSymbol(f"Cannot define {name!r} as a symbol")
        log.debug("define %s", name)
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name`, or None if it is unbound."""
        scope = self.find(name)
        if scope is None:
            return None
        return scope.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Like `get`, but raises LispUnknownSymbol for an unbound name."""
        scope = self.find(name)
        if scope is None:
            log.debug("lookup of unbound symbol %s", name)
            raise LispUnknownSymbol(name)
        return scope.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the scope chain.

        Raises LispUnknownSymbol if the symbol is not bound anywhere.
        """
        scope = self.find(name)
        if scope is None:
            raise LispUnknownSymbol(name)
        scope.vars[name] = value

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Scope chain: ")
            frames = []
            scope: Optional[Scope] = self
            while scope is not None:
                with StringIO() as frame:
                    scope._write_vars(frame)
                    frames.append(frame.getvalue())
                scope = scope.outer
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
