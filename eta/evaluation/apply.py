"""Application engine for Eta.

Centralizes procedure application so that the evaluator and the `apply`
special form share one set of rules:
- Closures bind their parameters in a fresh frame and hand their body back
  as a TailCall, which the evaluator loop runs without growing the stack.
- Builtins run immediately on the already-evaluated arguments.
- Anything else is not callable.
"""

from __future__ import annotations

from eta import LispValue
from eta.errors import EtaNotCallable
from eta.printer import print_value
from eta.types.procedure import Builtin, Closure
from eta.types.tail_call import TailCall


def apply(fn: LispValue, args: list[LispValue]) -> LispValue | TailCall:
    match fn:
        case Closure():
            return TailCall(fn.body, fn.bind(args))
        case Builtin():
            return fn(args)
        case _:
            raise EtaNotCallable(f"{print_value(fn)} is not a procedure")
