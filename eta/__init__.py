# Core type aliases for Eta's data model.
# Runtime values are plain Python objects: bool, float, str, plus the Symbol,
# Nil, Pair, Closure and Builtin classes from eta.types.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable: code is data.

from typing import Any, Callable

from loguru import logger

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

# Library code stays silent until an application calls configure_logging()
logger.disable("eta")

from eta.reader.parser import parse  # noqa: E402
from eta.evaluation.evaluator import evaluate  # noqa: E402
from eta.builtins import make_global_environment  # noqa: E402
from eta.printer import print_value  # noqa: E402
from eta.interpreter import Interpreter  # noqa: E402

__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "parse",
    "evaluate",
    "make_global_environment",
    "print_value",
    "Interpreter",
]
