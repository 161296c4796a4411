from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaArityError, EtaNoMatchingClause
from eta.types.environment import Environment
from eta.types.pair import Pair, iter_list
from eta.types.predicates import is_truthy
from eta.types.tail_call import TailCall


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue | TailCall:
    """
    (cond (test result) ...)

    Tests run in order; the result of the first clause whose test is not #f
    is evaluated in tail position. Falling off the end is an error rather
    than an implicit value.
    """
    if not tail:
        raise EtaArityError("cond requires at least one clause")

    for clause in tail:
        parts = list(iter_list(clause, "cond clause")) if isinstance(clause, Pair) else []
        if len(parts) != 2:
            raise EtaArityError("cond clause must have the form (test result)")
        test, result = parts
        if is_truthy(evaluate_fn(test, env)):
            return TailCall(result, env)

    raise EtaNoMatchingClause("no cond clause matched")
