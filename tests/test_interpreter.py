from sable.interpreter import Interpreter
from sable.types.environment import create_empty
from sable.types.errors import EvalFailure, ParseFailure
from sable.types.values import Integer, List, Str, Symbol


def test_eval_returns_each_result():
    interp = Interpreter()
    assert interp.eval('(define x 1) x "s" \'(a)') == [
        Symbol("x"),
        Integer(1),
        Str("s"),
        List(Symbol("a")),
    ]


def test_bindings_persist_between_calls():
    interp = Interpreter()
    interp.eval("(define counter 1)")
    interp.eval("(set! counter 2)")
    assert interp.eval("counter") == [Integer(2)]


def test_uses_supplied_environment():
    env = create_empty()
    env.bind(Symbol("x"), Integer(9))
    assert Interpreter(env).eval("x") == [Integer(9)]


def test_parse_failure_evaluates_nothing():
    interp = Interpreter()
    result = interp.eval("(define x 1) (")
    assert isinstance(result, ParseFailure)
    assert Symbol("x") not in interp.env


def test_eval_failure_stops_the_batch():
    interp = Interpreter()
    result = interp.eval("(define a 1) missing (define b 2)")
    assert isinstance(result, EvalFailure)
    assert Symbol("a") in interp.env
    assert Symbol("b") not in interp.env


def test_empty_source():
    assert Interpreter().eval("  ; nothing\n") == []
