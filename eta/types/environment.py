"""Runtime environment for Eta.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared by reference: every
closure built in a frame keeps that frame (and its chain) alive, and sees
later changes made to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from eta import LispValue
from eta.errors import EtaTypeError, EtaUnboundSymbol
from eta.types.symbol import Symbol


class _UnassignedType:
    """Placeholder held by a name whose `let` value is still being computed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "#<unassigned>"


Unassigned = _UnassignedType()


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any previous binding.

        Raises EtaTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise EtaTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def remove(self, name: Symbol) -> None:
        """Drop `name` from this frame; a no-op when it is not bound here."""
        self.vars.pop(name, None)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        `let` placeholders are skipped so an outer binding stays visible
        while the inner one is being computed. Raises EtaUnboundSymbol if
        no real binding exists.
        """
        pending = False
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                value = env.vars[name]
                if value is not Unassigned:
                    return value
                pending = True
            env = env.outer
        if pending:
            raise EtaUnboundSymbol(f"symbol `{name}` used before its value was bound")
        raise EtaUnboundSymbol(f"undefined symbol `{name}`")

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
