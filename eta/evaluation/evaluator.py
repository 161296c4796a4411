"""Core evaluator for the Eta interpreter.

`evaluate` is a single loop over a working (expr, env) pair. Special forms
and closure application return a TailCall for their tail-position
sub-expression; the loop rebinds expr and env from it and goes round again
instead of recursing, so tail calls run in constant Python stack. Operators,
operands and other non-tail sub-expressions are evaluated recursively.
"""

from __future__ import annotations

from eta import SExpression, LispValue
from eta.evaluation.apply import apply
from eta.evaluation.special_forms import SPECIAL_FORMS
from eta.types.environment import Environment
from eta.types.pair import Pair, iter_list
from eta.types.symbol import Symbol
from eta.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    while True:
        match expr:
            case Symbol():
                return env.lookup(expr)

            case Pair(Symbol() as head, rest) if head in SPECIAL_FORMS:
                result = SPECIAL_FORMS[head](
                    list(iter_list(rest, "special form")), env, evaluate
                )

            case Pair(head, rest):
                fn = evaluate(head, env)
                args = [evaluate(arg, env) for arg in iter_list(rest, "argument list")]
                result = apply(fn, args)

            case _:
                # Booleans, numbers, strings, Nil and procedures evaluate to themselves
                return expr

        if isinstance(result, TailCall):
            expr, env = result.expr, result.env
            continue
        return result
