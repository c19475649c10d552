from __future__ import annotations

import logging
from typing import Optional, Union

from sable.evaluation.evaluator import evaluate
from sable.reader.parser import read_all
from sable.types.environment import Environment, create_empty
from sable.types.errors import EvalFailure, ParseFailure
from sable.types.values import Value

log = logging.getLogger(__name__)


class Interpreter:
    """
    A session over one environment: reads source text and evaluates each
    datum in order. Bindings made by one call are visible to the next.
    """
    def __init__(self, env: Optional[Environment] = None):
        self.env = env if env is not None else create_empty()

    def eval(self, code: str) -> Union[list[Value], ParseFailure, EvalFailure]:
        """Evaluate every datum in `code`; stop at the first failure."""
        exprs = read_all(code)
        if isinstance(exprs, ParseFailure):
            return exprs

        results: list[Value] = []
        for expr in exprs:
            result = evaluate(self.env, expr)
            if isinstance(result, EvalFailure):
                log.debug("stopping after %d of %d forms", len(results), len(exprs))
                return result
            results.append(result)
        return results
