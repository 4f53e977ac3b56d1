# Core type aliases for the conslisp data model.
# Atoms are plain Python objects (int, float, str) next to the Symbol, Nil,
# Builtin and Lambda types; code and data share the persistent List type
# defined in conslisp.types.cons_list.
#
# Naming guidance:
# - SExpression: a form as produced by a reader, before evaluation.
# - LispValue:  the result of evaluating a form.
# Both resolve to `Any` and are interchangeable; the names document intent.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Native implementation of a Builtin: (tail, scope) -> value
NativeFn = Callable[..., LispValue]

__version__ = "0.1.0"

# Installs the package NullHandler; hosts opt in via conslisp.log.configure_logging
from conslisp import log  # noqa: E402,F401
