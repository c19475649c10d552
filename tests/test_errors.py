import pytest

from sable.types.errors import (
    EvalFailure,
    ParseFailure,
    SableArityError,
    SableError,
    SableSyntaxError,
    is_failure,
)
from sable.types.values import Integer


def test_is_failure():
    assert is_failure(ParseFailure(0, "bad"))
    assert is_failure(EvalFailure("arity", "bad"))
    assert not is_failure(Integer(1))


def test_parse_failure_to_exception():
    exc = ParseFailure(4, "unexpected ')'", "(a) )").to_exception()
    assert isinstance(exc, SableSyntaxError)
    assert exc.position == 4
    assert "column 5" in str(exc)


@pytest.mark.parametrize(
    "kind, exc_type",
    [("arity", SableArityError), ("unsupported-form", SableError)],
)
def test_eval_failure_to_exception(kind, exc_type):
    exc = EvalFailure(kind, "message").to_exception()
    assert type(exc) is exc_type
    assert str(exc) == "message"


def test_error_to_failure_keeps_kind():
    assert SableArityError("two please").failure() == EvalFailure("arity", "two please")


def test_failure_text_does_not_affect_equality():
    assert ParseFailure(1, "m", "abc") == ParseFailure(1, "m", "xyz")
