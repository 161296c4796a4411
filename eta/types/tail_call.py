from eta import SExpression
from eta.types.environment import Environment


class TailCall:
    """Marker returned for a tail-position expression; the evaluator loop
    rebinds (expr, env) from it instead of recursing."""

    __slots__ = ("expr", "env")

    def __init__(self, expr: SExpression, env: Environment):
        self.expr = expr
        self.env = env
