"""Canonical textual rendering of Eta values.

Output of print_value reads back through the parser to an equal value for
every literal category (booleans, numbers, strings, symbols, lists).
"""

from __future__ import annotations

from io import StringIO

from eta import LispValue
from eta.errors import EtaRecursionError
from eta.types.nil import NilType
from eta.types.pair import Pair
from eta.types.procedure import Builtin, Closure
from eta.types.symbol import Symbol

_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}

# Largest magnitude at which every integer is still exact in a double
_EXACT_INT_LIMIT = 2**53


def format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < _EXACT_INT_LIMIT:
        return str(int(value))
    return repr(value)


def format_string(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(ch, ch) for ch in value) + '"'


def print_value(value: LispValue) -> str:
    with StringIO() as buffer:
        try:
            _write(value, buffer)
        except RecursionError:
            raise EtaRecursionError("value is nested too deeply to print") from None
        return buffer.getvalue()


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case bool():
            buffer.write("#t" if value else "#f")
        case int() | float():
            buffer.write(format_number(value))
        case str():
            buffer.write(format_string(value))
        case Symbol():
            buffer.write(value.id)
        case NilType():
            buffer.write("()")
        case Pair():
            _write_pair(value, buffer)
        case Closure():
            buffer.write("#<closure>")
        case Builtin():
            buffer.write(f"#<builtin {value.name}>")
        case _:
            buffer.write(f"#<{type(value).__name__}>")


def _write_pair(value: Pair, buffer: StringIO) -> None:
    buffer.write("(")
    _write(value.head, buffer)
    rest = value.tail
    while isinstance(rest, Pair):
        buffer.write(" ")
        _write(rest.head, buffer)
        rest = rest.tail
    if not isinstance(rest, NilType):
        buffer.write(" . ")
        _write(rest, buffer)
    buffer.write(")")
