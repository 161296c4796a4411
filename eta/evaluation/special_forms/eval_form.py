from eta import EvaluatorFn
from eta import SExpression
from eta.errors import EtaArityError
from eta.types.environment import Environment
from eta.types.tail_call import TailCall


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(tail) != 1:
        raise EtaArityError("eval expects exactly one argument")
    # The argument is evaluated first; its value is then run as code
    expr_to_eval = evaluate_fn(tail[0], env)
    return TailCall(expr_to_eval, env)
