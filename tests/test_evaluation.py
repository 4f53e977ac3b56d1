import pytest
from hypothesis import given, strategies as st

from conslisp.builtin.env_builtin import standard_scope
from conslisp.errors import LispInvalidCall, LispUnknownSymbol
from conslisp.evaluation.evaluator import evaluate, quote, type_name
from conslisp.types.builtin import Builtin
from conslisp.types.cons_list import List, End
from conslisp.types.nil import Nil
from conslisp.types.symbol import Symbol


def L(*items):
    return List.from_iterable(items)


S = Symbol


def recording_builtin(log, evaluate_args=True):
    """A procedure that records the tail it was handed and returns it."""
    def fn(tail, scope):
        log.append(tail)
        return tail
    return Builtin("record", fn, evaluate_args)


# ------------------ Type names and quoting ------------------

def test_type_names():
    assert type_name(Nil) == "Nil"
    assert type_name(5) == "Number"
    assert type_name(2.5) == "Number"
    assert type_name(S("x")) == "Symbol"
    assert type_name("x") == "String"
    assert type_name(Builtin("f", lambda t, s: Nil)) == "Builtin"
    assert type_name(End) == "List"
    assert type_name(L(1)) == "List"


def test_type_name_of_lambda(scope):
    lam = evaluate(L(S("lambda"), L(S("x")), S("x")), scope)
    assert type_name(lam) == "Lambda"


def test_quote_builds_quote_form():
    q = quote(5)
    assert q == L(S("quote"), 5)
    assert q.car == S("quote")
    assert q.cdr == L(5)


@given(st.one_of(st.integers(), st.text(), st.builds(Symbol, st.text(min_size=1))))
def test_eval_of_quote_is_identity(v):
    assert evaluate(quote(v), standard_scope()) == v


def test_quote_leaves_lists_unevaluated(scope):
    form = L(S("undefined-fn"), S("undefined-arg"))
    assert evaluate(quote(form), scope) == form


# ------------------ Value evaluation ------------------

def test_self_evaluating_literals(bare_scope):
    assert evaluate(1, bare_scope) == 1
    assert evaluate(3.14, bare_scope) == 3.14
    assert evaluate("hello", bare_scope) == "hello"
    assert evaluate(Nil, bare_scope) is Nil


def test_symbol_lookup(bare_scope):
    with pytest.raises(LispUnknownSymbol) as exc:
        evaluate(S("x"), bare_scope)
    assert exc.value.name == S("x")

    bare_scope.define(S("x"), 5)
    assert evaluate(S("x"), bare_scope) == 5


def test_symbol_bound_to_nil(bare_scope):
    bare_scope.define(S("x"), Nil)
    assert evaluate(S("x"), bare_scope) is Nil


# ------------------ List evaluation ------------------

def test_list_eval_evaluates_each_element(bare_scope):
    bare_scope.define(S("a"), 1)
    bare_scope.define(S("b"), 2)
    assert L(S("a"), S("b"), 3).eval(bare_scope) == L(1, 2, 3)
    assert End.eval(bare_scope) is End


def test_list_eval_stops_at_first_failure(bare_scope):
    seen = []
    bare_scope.define(S("record"), recording_builtin(seen))
    form = L(L(S("record"), 1), S("x"), L(S("record"), 3))

    with pytest.raises(LispUnknownSymbol) as exc:
        form.eval(bare_scope)
    assert exc.value.name == S("x")
    assert seen == [L(1)]


def test_eval_to_value(bare_scope):
    assert End.eval_to_value(bare_scope) is Nil
    assert L(1, 2, 3).eval_to_value(bare_scope) == 3


def test_eval_to_value_runs_every_form_in_order(scope):
    seen = []
    scope.define(S("record"), recording_builtin(seen))
    body = L(L(S("record"), 1), L(S("record"), 2), 7)
    assert body.eval_to_value(scope) == 7
    assert seen == [L(1), L(2)]


# ------------------ Call dispatch ------------------

def test_calling_end_yields_nil(bare_scope):
    assert End.call(bare_scope) is Nil
    assert evaluate(End, bare_scope) is Nil


def test_calling_a_non_callable(bare_scope):
    bare_scope.define(S("f"), 2)
    with pytest.raises(LispInvalidCall) as exc:
        evaluate(L(S("f"), 1), bare_scope)
    assert exc.value.type_name == "Number"


@pytest.mark.parametrize(
    "head,expected",
    [("text", "String"), (L(S("quote"), S("a")), "Symbol"), (L(S("quote"), L(1)), "List")],
)
def test_invalid_call_reports_head_type(scope, head, expected):
    with pytest.raises(LispInvalidCall) as exc:
        evaluate(L(head, 1), scope)
    assert exc.value.type_name == expected


def test_unknown_head_symbol(bare_scope):
    with pytest.raises(LispUnknownSymbol):
        evaluate(L(S("nope"), 1), bare_scope)


def test_head_is_evaluated(scope):
    # ((lambda (x) (* x 2)) 21)
    form = L(L(S("lambda"), L(S("x")), L(S("*"), S("x"), 2)), 21)
    assert evaluate(form, scope) == 42


def test_procedure_receives_evaluated_tail(bare_scope):
    seen = []
    bare_scope.define(S("record"), recording_builtin(seen, evaluate_args=True))
    bare_scope.define(S("y"), 10)
    assert evaluate(L(S("record"), S("y"), "s"), bare_scope) == L(10, "s")


def test_special_form_receives_raw_tail(bare_scope):
    seen = []
    bare_scope.define(S("record"), recording_builtin(seen, evaluate_args=False))
    result = evaluate(L(S("record"), S("unbound"), L(S("also-unbound"))), bare_scope)
    assert result == L(S("unbound"), L(S("also-unbound")))


def test_builtin_gets_caller_scope(bare_scope):
    bare_scope.define(S("whoami"), Builtin("whoami", lambda tail, scope: scope))
    assert evaluate(L(S("whoami")), bare_scope) is bare_scope


def test_policy_follows_runtime_value(bare_scope):
    seen = []
    bare_scope.define(S("y"), 1)
    bare_scope.define(S("f"), recording_builtin(seen, evaluate_args=True))
    form = L(S("f"), S("y"))
    assert evaluate(form, bare_scope) == L(1)

    bare_scope.define(S("f"), recording_builtin(seen, evaluate_args=False))
    assert evaluate(form, bare_scope) == L(S("y"))


def test_failure_in_argument_aborts_call(bare_scope):
    seen = []
    bare_scope.define(S("record"), recording_builtin(seen))
    with pytest.raises(LispUnknownSymbol):
        evaluate(L(S("record"), 1, S("missing")), bare_scope)
    assert seen == []


def test_lambda_arguments_evaluated_once_in_order(scope):
    seen = []
    scope.define(S("record"), recording_builtin(seen))
    # ((lambda (a b) (list b a)) (record 1) (record 2))
    fn = L(S("lambda"), L(S("a"), S("b")), L(S("list"), S("b"), S("a")))
    result = evaluate(L(fn, L(S("record"), 1), L(S("record"), 2)), scope)
    assert result == L(L(2), L(1))
    assert seen == [L(1), L(2)]
