from sable import EvaluatorFn, EvalResult
from sable.types.environment import Environment
from sable.types.errors import EvalFailure
from sable.types.values import NIL, Value


def begin_form(
    tail: list[Value],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EvalResult:
    result: EvalResult = NIL
    for e in tail:
        result = evaluate_fn(e, env)
        if isinstance(result, EvalFailure):
            return result
    return result
