import pickle

import pytest
from hypothesis import given, strategies as st

from conslisp.errors import LispTypeError, LispUnknownSymbol
from conslisp.types.cons_list import List, End, Cons
from conslisp.types.nil import Nil
from conslisp.types.symbol import Symbol

atoms = st.one_of(
    st.integers(),
    st.text(max_size=8),
    st.builds(Symbol, st.text(min_size=1, max_size=8)),
)


def L(*items):
    return List.from_iterable(items)


# ------------------ Construction and iteration ------------------

def test_cons_prepends_without_touching_tail():
    tail = L(2, 3)
    lst = List.cons(1, tail)
    assert list(lst) == [1, 2, 3]
    assert list(tail) == [2, 3]
    assert lst.cdr is tail


def test_from_iterable_preserves_order():
    assert list(L(1, 2, 3)) == [1, 2, 3]
    assert List.from_iterable(iter(["a", "b"])).to_list() == ["a", "b"]
    assert List.from_iterable([]) is End


@given(st.lists(atoms))
def test_from_iterable_round_trip(xs):
    assert list(List.from_iterable(xs)) == xs


def test_iter_restarts_at_head():
    lst = L(1, 2, 3)
    it = lst.iter()
    assert next(it) == 1
    assert list(lst.iter()) == [1, 2, 3]
    assert list(it) == [2, 3]
    assert list(it) == []


def test_len_and_truthiness():
    assert len(End) == 0
    assert not End
    assert len(L(1, 2, 3)) == 3
    assert L(Nil)


def test_cons_cell_tail_must_be_a_list():
    with pytest.raises(LispTypeError):
        Cons(1, 2)
    with pytest.raises(LispTypeError):
        List.cons(1, [2, 3])


def test_cons_cells_are_immutable():
    lst = L(1, 2)
    with pytest.raises(AttributeError):
        lst.car = 5
    with pytest.raises(AttributeError):
        lst.cdr = End
    with pytest.raises(AttributeError):
        del lst.car


def test_shared_tails():
    shared = L(3, 4)
    a = List.cons(1, shared)
    b = List.cons(2, shared)
    assert a.cdr is b.cdr
    assert list(a) == [1, 3, 4]
    assert list(b) == [2, 3, 4]


def test_long_list_does_not_recurse():
    n = 100_000
    lst = List.from_iterable(range(n))
    assert len(lst) == n
    assert lst == List.from_iterable(range(n))


# ------------------ Equality ------------------

def test_end_equality():
    assert End == End
    assert End != L(1)
    assert L(1) != End
    assert End != L(Nil)


@given(atoms)
def test_end_differs_from_any_one_element_list(v):
    assert End != List.cons(v, End)


@given(st.lists(atoms), st.lists(atoms))
def test_equality_is_elementwise(xs, ys):
    assert (List.from_iterable(xs) == List.from_iterable(ys)) == (xs == ys)


def test_equality_is_structural():
    assert L(1, L(2, "x"), Symbol("y")) == L(1, L(2, "x"), Symbol("y"))
    assert L(1, 2) != L(1, 2, 3)
    assert L(1, 2, 3) != L(1, 2)
    assert L("a") != L(Symbol("a"))


def test_equality_short_circuits_on_first_mismatch():
    class Boom:
        def __eq__(self, other):
            raise AssertionError("compared past the first mismatch")

    assert L(1, Boom()) != L(2, Boom())


def test_equality_with_other_types():
    assert L(1, 2) != [1, 2]
    assert End != Nil


def test_hash_follows_equality():
    assert hash(L(1, 2)) == hash(L(1, 2))
    assert {L(1, 2): "x"}[L(1, 2)] == "x"


# ------------------ Folding ------------------

def test_fold_left_to_right():
    assert L(1, 2, 3).fold([], lambda acc, v: acc + [v]) == [1, 2, 3]
    assert L(1, 2, 3).fold(0, lambda acc, v: acc * 10 + v) == 123
    assert End.fold("init", lambda acc, v: v) == "init"


def test_fold_short_circuits_on_error():
    calls = []

    def step(acc, value):
        calls.append(value)
        if value == 2:
            raise LispUnknownSymbol(Symbol("x"))
        return acc + value

    with pytest.raises(LispUnknownSymbol) as exc:
        L(1, 2, 3, 4).fold(0, step)
    assert exc.value.name == Symbol("x")
    assert calls == [1, 2]


# ------------------ Printing ------------------

def test_repr():
    assert repr(End) == "()"
    assert repr(L(1, Symbol("a"), "s", L(2))) == '(1 a "s" (2))'
    assert str(L(Nil)) == "(nil)"


def test_pickle_preserves_structure():
    lst = L(1, L(2, 3), "x")
    assert pickle.loads(pickle.dumps(lst)) == lst
    assert pickle.loads(pickle.dumps(End)) is End
