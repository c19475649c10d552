from sable import EvaluatorFn, EvalResult
from sable.types.environment import Environment
from sable.types.errors import EvalFailure, SableInvalidSymbol
from sable.types.values import Value


def define_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EvalResult:
    """
    (define name value)
    Binds in the current frame, shadowing outer bindings, and returns the name.
    """
    if len(tail) != 2:
        return EvalFailure("arity", "define requires exactly 2 arguments: (define name value)")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    if isinstance(value, EvalFailure):
        return value
    try:
        env.bind(name, value)
    except SableInvalidSymbol as exc:
        return exc.failure()
    return name
