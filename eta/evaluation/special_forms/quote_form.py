from eta import SExpression, LispValue, EvaluatorFn
from eta.errors import EtaArityError
from eta.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise EtaArityError("quote expects exactly 1 argument")
    return tail[0]
