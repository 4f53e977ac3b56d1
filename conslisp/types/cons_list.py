"""Persistent singly linked lists.

A List is either the `End` singleton or a `Cons` cell holding a value (`car`)
and the rest of the list (`cdr`). Cells are never mutated after construction,
so any number of lists may share a common tail. Because a cell's `cdr` must
already be a finished List when the cell is built, a chain always terminates
in `End` and no cycle can be formed.

The same structure doubles as program syntax: a non-empty List evaluated as a
form is a call whose head names the callable (see conslisp.evaluation.apply).
"""

from __future__ import annotations

from io import StringIO
from typing import Callable, Iterable, Iterator, TypeVar

from conslisp import LispValue
from conslisp.errors import LispTypeError

T = TypeVar("T")


class List:
    """Common behaviour of `End` and `Cons`."""

    __slots__ = ()

    # --- Construction ---
    @staticmethod
    def cons(car: LispValue, cdr: List) -> Cons:
        """Prepend `car` to `cdr` without touching `cdr`."""
        return Cons(car, cdr)

    @staticmethod
    def from_iterable(items: Iterable[LispValue]) -> List:
        """Build a List holding `items` in their original order."""
        result: List = End
        for item in reversed(list(items)):
            result = Cons(item, result)
        return result

    # --- Iteration ---
    def iter(self) -> Iterator[LispValue]:
        return ListIterator(self)

    def __iter__(self) -> Iterator[LispValue]:
        return ListIterator(self)

    def __len__(self) -> int:
        n = 0
        node = self
        while node is not End:
            n += 1
            node = node.cdr  # type: ignore[attr-defined]
        return n

    def to_list(self) -> list[LispValue]:
        return list(self)

    def fold(self, initial: T, fn: Callable[[T, LispValue], T]) -> T:
        """Left fold. An exception from `fn` stops the fold where it is raised."""
        acc = initial
        for value in self:
            acc = fn(acc, value)
        return acc

    # --- Evaluation ---
    def eval(self, scope) -> List:
        """Evaluate each element in order, collecting the results."""
        from conslisp.evaluation.evaluator import evaluate

        return List.from_iterable([evaluate(value, scope) for value in self])

    def eval_to_value(self, scope) -> LispValue:
        """Evaluate each element in order; return the last result (Nil if empty)."""
        from conslisp.evaluation.evaluator import evaluate
        from conslisp.types.nil import Nil

        return self.fold(Nil, lambda _, value: evaluate(value, scope))

    def call(self, scope) -> LispValue:
        """Apply this list as a form: the head is the callable, the tail its arguments."""
        from conslisp.evaluation.apply import apply

        return apply(self, scope)

    # --- Comparison ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        a: List = self
        b: List = other
        # Stops early once both sides reach the same (shared) tail
        while a is not b:
            if a is End or b is End:
                return False
            if a.car != b.car:  # type: ignore[attr-defined]
                return False
            a, b = a.cdr, b.cdr  # type: ignore[attr-defined]
        return True

    def __hash__(self) -> int:
        return hash(tuple(self))

    # --- Printing ---
    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(format_value(v) for v in self))
            buffer.write(")")
            return buffer.getvalue()

    __str__ = __repr__


class EndType(List):
    """The empty list."""

    __slots__ = ()
    _instance: EndType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __len__(self) -> int:
        return 0

    def __reduce__(self):
        return (EndType, ())


End = EndType()


class Cons(List):
    """An immutable cell: a value and the List that follows it."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: List = End):
        if not isinstance(cdr, List):
            raise LispTypeError(f"The tail of a cons cell must be a list, got {cdr!r}")
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, key, value):
        raise AttributeError("Cons cells are immutable")

    def __delattr__(self, key):
        raise AttributeError("Cons cells are immutable")

    def __bool__(self) -> bool:
        return True

    def __reduce__(self):
        return (List.from_iterable, (list(self),))


class ListIterator:
    """Walks a List from the head; every call to List.iter() gets a fresh one."""

    __slots__ = ("node",)

    def __init__(self, node: List):
        self.node = node

    def __iter__(self) -> ListIterator:
        return self

    def __next__(self) -> LispValue:
        node = self.node
        if node is End:
            raise StopIteration
        self.node = node.cdr  # type: ignore[attr-defined]
        return node.car  # type: ignore[attr-defined]


def format_value(value: LispValue) -> str:
    """Lisp-style printed form of a value."""
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)
