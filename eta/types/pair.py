"""Cons cells and helpers for walking Pair chains.

Lists are right-nested Pairs terminated by Nil. Dotted chains, where the
last tail is something other than Nil, are valid values but are rejected by
anything that needs a proper list (special forms, application, apply).
"""

from __future__ import annotations

from typing import Iterable, Iterator

from eta import LispValue
from eta.errors import EtaTypeError
from eta.types.nil import Nil


class Pair:
    __slots__ = ("head", "tail")
    __match_args__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue):
        self.head = head
        self.tail = tail

    def __eq__(self, other: object) -> bool:
        from eta.types.predicates import values_equal
        return isinstance(other, Pair) and values_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        from eta.printer import print_value
        return f"Pair<{print_value(self)}>"

    def __str__(self) -> str:
        from eta.printer import print_value
        return print_value(self)


def make_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a right-nested Pair chain from items, ending in tail."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: LispValue, what: str = "list") -> Iterator[LispValue]:
    """Yield the elements of a proper list.

    Raises EtaTypeError when the chain ends in anything but Nil.
    """
    while isinstance(value, Pair):
        yield value.head
        value = value.tail
    if value is not Nil:
        raise EtaTypeError(f"Expected a proper {what}")
