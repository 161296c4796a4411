from __future__ import annotations

from eta import LispValue
from eta.types.pair import Pair
from eta.types.symbol import Symbol


def is_number(value: LispValue) -> bool:
    # bool is an int subclass in Python but never a Lisp number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: LispValue) -> bool:
    """Only #f is false; Nil, 0 and "" are all true."""
    return value is not False


def values_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality used by `eq` and `neq`.

    Pair chains are compared element by element along the tail without
    recursion; heads recurse.
    """
    while isinstance(a, Pair) and isinstance(b, Pair):
        if a is b:
            return True
        if not values_equal(a.head, b.head):
            return False
        a, b = a.tail, b.tail
    return _atoms_equal(a, b)


def _atoms_equal(a: LispValue, b: LispValue) -> bool:
    if a is b:
        return True
    match a, b:
        case (bool(), _) | (_, bool()):
            return False
        case (int() | float(), int() | float()):
            return a == b
        case (str(), str()):
            return a == b
        case (Symbol(), Symbol()):
            return a.id == b.id
        case _:
            # Nil, closures and builtins are equal only to themselves
            return False
