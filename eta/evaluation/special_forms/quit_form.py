from eta import EvaluatorFn
from eta import SExpression
from eta.errors import EtaArityError, QuitRequested
from eta.types.environment import Environment


def quit_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
):
    if tail:
        raise EtaArityError("quit takes no arguments")
    raise QuitRequested()
