from __future__ import annotations

import threading
from typing import Iterator

from loguru import logger

from eta import SExpression, LispValue
from eta.builtins import make_global_environment
from eta.errors import EtaRecursionError, EtaSyntaxError
from eta.evaluation.evaluator import evaluate
from eta.printer import print_value
from eta.reader.parser import parse
from eta.types.environment import Environment
from eta.types.nil import Nil


class Interpreter:
    """
    Orchestrates reading and evaluating Eta code.
    Maintains one global Environment across calls.

    Each top-level evaluation holds a re-entrant lock, so hosts that share
    an interpreter between threads (the network REPL) never interleave a
    `let` with another expression.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = make_global_environment()
        self._lock = threading.RLock()
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for _ in self.eval_iter(code):
            pass

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one parsed expression against the global environment."""
        with self._lock:
            try:
                return evaluate(expr, self.env)
            except RecursionError:
                raise EtaRecursionError(
                    "maximum recursion depth exceeded (only tail calls run in constant space)"
                ) from None

    def eval_iter(self, code: str) -> Iterator[tuple[SExpression, LispValue]]:
        """Parse all of code, then yield (expr, value) per top-level expression."""
        try:
            exprs = parse(code)
        except RecursionError:
            raise EtaSyntaxError("expression is nested too deeply to read") from None
        for expr in exprs:
            logger.opt(lazy=True).debug("eval {}", lambda: print_value(expr))
            yield expr, self.eval_expr(expr)

    def eval(self, code: str) -> LispValue:
        results: list[LispValue] = [value for _, value in self.eval_iter(code)]
        if not results:
            return Nil
        if len(results) == 1:
            return results[0]
        return results
