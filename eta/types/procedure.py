"""Callable values: user closures and native builtins."""

from __future__ import annotations

from typing import Callable

from eta import LispValue, SExpression
from eta.errors import EtaArityError
from eta.types.environment import Environment
from eta.types.symbol import Symbol


class Closure:
    """A first-class lambda with formal parameters, body, and closure env.

    The captured environment is shared, never copied, so bindings added to
    the defining frames after the closure was built are visible to it.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(str(p) for p in self.params)})>"

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a fresh frame, child of the captured env, binding params to args."""
        if len(args) != len(self.params):
            raise EtaArityError(
                f"Expected {len(self.params)} argument(s), got {len(args)}"
            )
        frame = Environment(outer=self.env)
        frame.vars.update(zip(self.params, args))
        return frame


class Builtin:
    """A native operation with an inclusive arity range (max_args None = variadic)."""

    __slots__ = ("name", "fn", "min_args", "max_args")

    def __init__(
        self,
        name: str,
        fn: Callable[[list[LispValue]], LispValue],
        min_args: int = 0,
        max_args: int | None = None,
    ):
        self.name = name
        self.fn = fn
        self.min_args = min_args
        self.max_args = max_args

    def __repr__(self) -> str:
        return f"<Builtin {self.name}>"

    def __call__(self, args: list[LispValue]) -> LispValue:
        n = len(args)
        if n < self.min_args or (self.max_args is not None and n > self.max_args):
            raise EtaArityError(f"{self.name} expects {self._arity_text()}, got {n}")
        return self.fn(args)

    def _arity_text(self) -> str:
        if self.max_args is None:
            return f"at least {self.min_args} argument(s)"
        if self.min_args == self.max_args:
            return f"exactly {self.min_args} argument(s)"
        return f"{self.min_args} to {self.max_args} arguments"
