from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaArityError, EtaTypeError
from eta.types.environment import Environment
from eta.types.pair import iter_list
from eta.types.procedure import Closure
from eta.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params...) body): the body is not evaluated until application
    if len(tail) != 2:
        raise EtaArityError("lambda requires a parameter list and a single body")

    params_expr, body = tail
    params = list(iter_list(params_expr, "parameter list"))
    for p in params:
        if not isinstance(p, Symbol):
            raise EtaTypeError(f"lambda parameter must be a symbol, got {p!r}")
    if len(set(params)) != len(params):
        raise EtaTypeError("lambda parameters must be distinct")

    return Closure(params, body, env)
