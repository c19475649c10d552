from sable import EvaluatorFn, EvalResult
from sable.types.environment import Environment
from sable.types.errors import EvalFailure
from sable.types.values import FALSE, NIL, Value


def if_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EvalResult:
    if len(tail) not in (2, 3):
        return EvalFailure("arity", "if requires a test, a consequent and an optional alternative")

    test = evaluate_fn(tail[0], env)
    if isinstance(test, EvalFailure):
        return test

    # Scheme truthiness: everything except #f is true
    if test != FALSE:
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return NIL  # unspecified value when there is no alternative
