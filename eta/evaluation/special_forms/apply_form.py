from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaArityError
from eta.evaluation.apply import apply as apply_engine
from eta.types.environment import Environment
from eta.types.pair import iter_list
from eta.types.tail_call import TailCall


def apply_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """
    (apply fn args)

    Evaluates fn and args, then applies fn to the elements of the list args
    evaluated to. A closure's body is returned as a TailCall like any other
    application in tail position.
    """
    if len(tail) != 2:
        raise EtaArityError(
            "apply expects exactly two arguments: function and argument list"
        )

    fn_expr, args_expr = tail
    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)

    return apply_engine(fn_val, list(iter_list(args_val, "argument list for apply")))
