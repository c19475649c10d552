import pytest

from sable.evaluation.evaluator import EVALUATORS, evaluate
from sable.types.errors import EvalFailure
from sable.types.values import (
    VALUE_TYPES,
    Boolean,
    Char,
    Integer,
    List,
    Str,
    Symbol,
    Vector,
)

# -----------------------------------------------------
# Tests
# -----------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [
        Boolean(False),
        Boolean(True),
        Str("This is a string."),
        Str(""),
        Integer(1),
        Integer(-(10 ** 40)),
        Char("c"),
        Vector(),
        Vector(Symbol("unbound"), List(Symbol("f"), Integer(1))),
        List(),
    ],
)
def test_self_evaluating_literals(env, value):
    assert evaluate(env, value) == value


def test_self_evaluation_ignores_environment(populated_env):
    assert evaluate(populated_env, Boolean(False)) == Boolean(False)
    assert evaluate(populated_env, Str("x")) == Str("x")


def test_symbol_lookup(populated_env):
    assert evaluate(populated_env, Symbol("x")) == Integer(42)
    assert evaluate(populated_env, Symbol("greeting")) == Str("hello")


def test_unbound_symbol_is_a_failure(env):
    result = evaluate(env, Symbol("z"))
    assert isinstance(result, EvalFailure)
    assert result.kind == "unbound-variable"
    assert "z" in result.message


def test_lookup_sees_outer_scopes(populated_env):
    inner = populated_env.extend()
    inner.bind(Symbol("x"), Integer(1))
    assert evaluate(inner, Symbol("x")) == Integer(1)
    assert evaluate(inner, Symbol("y")) == Integer(100)


def test_quote(env):
    expr = List(Symbol("quote"), List(Symbol("a")))
    assert evaluate(env, expr) == List(Symbol("a"))


def test_quoted_contents_are_not_evaluated(env):
    inner = List(Symbol("unbound"), List(Symbol("quote"), Symbol("b")), Integer(3))
    assert evaluate(env, List(Symbol("quote"), inner)) == inner


def test_application_is_unsupported(populated_env):
    result = evaluate(populated_env, List(Symbol("x"), Integer(1)))
    assert isinstance(result, EvalFailure)
    assert result.kind == "unsupported-form"


def test_non_symbol_head_is_unsupported(env):
    result = evaluate(env, List(Integer(1), Integer(2)))
    assert result.kind == "unsupported-form"


def test_every_value_kind_has_an_evaluator():
    assert set(EVALUATORS) == set(VALUE_TYPES)


def test_unknown_value_kind_is_a_failure(env):
    result = evaluate(env, object())
    assert isinstance(result, EvalFailure)
    assert result.kind == "unsupported"


def test_evaluation_depth_limit(env, shallow_depth):
    expr = Symbol("x")
    for _ in range(10):
        expr = List(Symbol("begin"), expr)
    env.bind(Symbol("x"), Integer(1))
    result = evaluate(env, expr)
    assert isinstance(result, EvalFailure)
    assert result.kind == "recursion-depth"


def test_failure_converts_to_exception(env):
    from sable.types.errors import SableUnboundSymbol

    result = evaluate(env, Symbol("missing"))
    with pytest.raises(SableUnboundSymbol):
        raise result.to_exception()


def test_raising_handler_becomes_a_failure(env, monkeypatch):
    from sable.evaluation.special_forms import SPECIAL_FORMS
    from sable.types.errors import SableBadForm

    def explode(tail, env, evaluate_fn):
        raise SableBadForm("explode always fails")

    monkeypatch.setitem(SPECIAL_FORMS, Symbol("explode"), explode)
    result = evaluate(env, List(Symbol("explode"), Integer(1)))
    assert result == EvalFailure("bad-form", "explode always fails")


def test_stack_overflow_becomes_a_failure(env, monkeypatch):
    from sable.evaluation.special_forms import SPECIAL_FORMS

    def overflow(tail, env, evaluate_fn):
        raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setitem(SPECIAL_FORMS, Symbol("overflow"), overflow)
    result = evaluate(env, List(Symbol("overflow")))
    assert isinstance(result, EvalFailure)
    assert result.kind == "recursion-depth"
