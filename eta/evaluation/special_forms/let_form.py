from eta import EvaluatorFn
from eta import SExpression, LispValue
from eta.errors import EtaArityError, EtaTypeError
from eta.types.environment import Environment, Unassigned
from eta.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name expr)

    Binds name in the current frame and returns the bound value. When name
    is new to the frame, a placeholder is installed while expr is evaluated,
    so a lambda built by expr captures the frame that will hold its own
    binding. Lookups skip the placeholder and fall through to outer frames.
    If evaluation fails the placeholder is removed again.
    """
    if len(tail) != 2:
        raise EtaArityError("let requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise EtaTypeError(f"let name must be a symbol, got {name!r}")

    installed = name not in env.vars
    if installed:
        env.define(name, Unassigned)
    try:
        value = evaluate_fn(val_expr, env)
    except BaseException:
        if installed:
            env.remove(name)
        raise
    env.define(name, value)
    return value
