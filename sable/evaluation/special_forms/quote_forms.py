from __future__ import annotations

from sable import EvaluatorFn, EvalResult
from sable.config import get_max_depth
from sable.types.environment import Environment
from sable.types.errors import EvalFailure
from sable.types.values import (
    List,
    QUASIQUOTE,
    UNQUOTE,
    UNQUOTE_SPLICING,
    Value,
    Vector,
)


def _unary(expr: List) -> bool:
    return len(expr) == 2


def _process_items(
    items: tuple[Value, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int,
    nesting: int,
    limit: int,
) -> list[Value] | EvalFailure:
    result_list: list[Value] = []
    for item in items:
        if (
            depth == 1
            and isinstance(item, List)
            and _unary(item)
            and item[0] == UNQUOTE_SPLICING
        ):
            spliced_val = evaluate_fn(item[1], env)
            if isinstance(spliced_val, EvalFailure):
                return spliced_val
            if not isinstance(spliced_val, List):
                return EvalFailure(
                    "bad-form", f"unquote-splicing must produce a list, got {spliced_val!r}"
                )
            result_list.extend(spliced_val)
            continue
        value = eval_quasiquote(item, env, evaluate_fn, depth, nesting + 1, limit)
        if isinstance(value, EvalFailure):
            return value
        result_list.append(value)
    return result_list


def eval_quasiquote(
    expr: Value,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    depth: int = 1,
    nesting: int = 0,
    limit: int | None = None,
) -> EvalResult:
    """Build the template `expr`, evaluating unquotes that belong to this level.

    `depth` is the quasiquote level; `nesting` counts how far the walk is
    inside the template and is bounded by `limit`.
    """
    if limit is None:
        limit = get_max_depth()
    if nesting > limit:
        return EvalFailure("recursion-depth", f"quasiquote template nested deeper than {limit} levels")

    if isinstance(expr, Vector):
        items = _process_items(expr.elements, env, evaluate_fn, depth, nesting, limit)
        if isinstance(items, EvalFailure):
            return items
        return Vector(*items)

    # Non-list atoms returned as-is
    if not isinstance(expr, List) or not expr:
        return expr

    head = expr[0]
    if _unary(expr) and head == QUASIQUOTE:
        inner = eval_quasiquote(expr[1], env, evaluate_fn, depth + 1, nesting + 1, limit)
        if isinstance(inner, EvalFailure):
            return inner
        return List(QUASIQUOTE, inner)
    if _unary(expr) and head in (UNQUOTE, UNQUOTE_SPLICING):
        if depth == 1:
            if head == UNQUOTE_SPLICING:
                return EvalFailure("bad-form", "unquote-splicing is only valid inside a list")
            return evaluate_fn(expr[1], env)
        inner = eval_quasiquote(expr[1], env, evaluate_fn, depth - 1, nesting + 1, limit)
        if isinstance(inner, EvalFailure):
            return inner
        return List(head, inner)

    items = _process_items(expr.elements, env, evaluate_fn, depth, nesting, limit)
    if isinstance(items, EvalFailure):
        return items
    return List(*items)


def quote_form(
    tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn
) -> EvalResult:
    if len(tail) != 1:
        return EvalFailure("arity", "quote expects exactly 1 argument")
    return tail[0]


def quasiquote_form(
    tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn
) -> EvalResult:
    if len(tail) != 1:
        return EvalFailure("arity", "quasiquote expects exactly 1 argument")
    return eval_quasiquote(tail[0], env, evaluate_fn)


def unquote_form(
    tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn
) -> EvalResult:
    return EvalFailure("bad-form", "unquote not valid outside of quasiquote")


def unquote_splice_form(
    tail: list[Value], env: Environment, evaluate_fn: EvaluatorFn
) -> EvalResult:
    return EvalFailure("bad-form", "unquote-splicing not valid outside of quasiquote")
