# Core type aliases for Sable.
# Values are the closed variant in sable.types.values; both entry points hand
# back either a Value or a failure record instead of raising.
#
# Naming guidance:
# - ReadResult: what the reader returns (Value | ParseFailure).
# - EvalResult: what the evaluator and form handlers return (Value | EvalFailure).
# - EvaluatorFn: the evaluator as handed to special-form handlers, (expr, env) -> EvalResult.

import logging
from typing import Callable

from sable.types.values import Value
from sable.types.errors import EvalFailure, EvalResult, ParseFailure, ReadResult, is_failure

EvaluatorFn = Callable[..., EvalResult]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from sable.types.environment import Environment, create_empty  # noqa: E402
from sable.reader.parser import read, read_all  # noqa: E402
from sable.evaluation.evaluator import evaluate  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "Value",
    "Environment",
    "EvalFailure",
    "EvalResult",
    "EvaluatorFn",
    "ParseFailure",
    "ReadResult",
    "create_empty",
    "evaluate",
    "is_failure",
    "read",
    "read_all",
]
