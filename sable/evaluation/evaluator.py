"""Core evaluator for Sable.

Dispatch goes through ``EVALUATORS``, a table keyed by the exact Value class,
so a new datum kind is supported by adding one entry. Lists whose head names
a special form are handed to the matching handler in ``SPECIAL_FORMS``.

Every step returns a Value or an ``EvalFailure``. Failures from
sub-evaluations are returned as soon as they are seen.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from sable.config import get_max_depth
from sable.evaluation.special_forms import SPECIAL_FORMS
from sable.types.environment import Environment
from sable.types.errors import EvalFailure, EvalResult, SableError, SableUnboundSymbol
from sable.types.values import (
    Boolean,
    Char,
    Integer,
    List,
    Str,
    Symbol,
    Value,
    Vector,
)

log = logging.getLogger(__name__)

Handler = Callable[[Value, Environment, int, int], EvalResult]


def evaluate(env: Environment, expr: Value) -> EvalResult:
    """Evaluate `expr` in `env`, returning its value or an EvalFailure."""
    limit = get_max_depth()
    try:
        result = evaluate0(expr, env, 0, limit)
    except SableError as exc:
        result = exc.failure()
    except RecursionError:
        # evaluator depth and quasiquote template nesting are bounded
        # separately; together they can still outrun the stack
        result = EvalFailure("recursion-depth", f"evaluation nested deeper than {limit} levels")
    if isinstance(result, EvalFailure):
        log.debug("evaluation of %s failed: %s", type(expr).__name__, result)
    return result


def evaluate0(expr: Value, env: Environment, depth: int, limit: int) -> EvalResult:
    """Single dispatch step; `depth` counts nested evaluations against `limit`."""
    if depth > limit:
        return EvalFailure("recursion-depth", f"evaluation nested deeper than {limit} levels")
    handler = EVALUATORS.get(type(expr))
    if handler is None:
        return EvalFailure("unsupported", f"Cannot evaluate {expr!r}")
    return handler(expr, env, depth, limit)


def _self_evaluating(expr: Value, env: Environment, depth: int, limit: int) -> EvalResult:
    return expr


def _eval_symbol(expr: Symbol, env: Environment, depth: int, limit: int) -> EvalResult:
    try:
        return env.lookup(expr)
    except SableUnboundSymbol as exc:
        return exc.failure()


def _eval_list(expr: List, env: Environment, depth: int, limit: int) -> EvalResult:
    if not expr:
        return expr

    match expr.elements:
        case (Symbol() as head, *tail) if head in SPECIAL_FORMS:
            evaluate_fn = partial(evaluate0, depth=depth + 1, limit=limit)
            return SPECIAL_FORMS[head](tail, env, evaluate_fn)

    return EvalFailure(
        "unsupported-form",
        f"Cannot evaluate {expr!r}: procedure application is not supported",
    )


EVALUATORS: dict[type[Value], Handler] = {
    Boolean: _self_evaluating,
    Str: _self_evaluating,
    Integer: _self_evaluating,
    Char: _self_evaluating,
    Vector: _self_evaluating,
    Symbol: _eval_symbol,
    List: _eval_list,
}
