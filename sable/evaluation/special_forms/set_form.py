from sable import EvaluatorFn, EvalResult
from sable.types.environment import Environment
from sable.types.errors import EvalFailure, SableUnboundSymbol
from sable.types.values import Symbol, Value


def set_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EvalResult:
    if len(tail) != 2:
        return EvalFailure("arity", "set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        return EvalFailure("invalid-symbol", f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    if isinstance(value, EvalFailure):
        return value
    try:
        env.set(var_sym, value)
    except SableUnboundSymbol as exc:
        return exc.failure()

    return value
