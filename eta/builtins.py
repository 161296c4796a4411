from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterable

from eta.errors import EtaArithmeticError, EtaTypeError
from eta.printer import print_value
from eta.types.environment import Environment
from eta.types.pair import Pair
from eta.types.predicates import is_number, is_truthy, values_equal
from eta.types.procedure import Builtin
from eta.types.symbol import Symbol


def _numbers(name: str, args: Iterable[Any]) -> list[float]:
    nums = []
    for a in args:
        if not is_number(a):
            raise EtaTypeError(f"{name}: value is not a number: {print_value(a)}")
        nums.append(float(a))
    return nums


def _pair(name: str, value: Any) -> Pair:
    if not isinstance(value, Pair):
        raise EtaTypeError(f"{name}: value is not a pair: {print_value(value)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Any]) -> float:
    return sum(_numbers("+", args), 0.0)


def sub(args: list[Any]) -> float:
    nums = _numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    return reduce(lambda a, b: a - b, nums)


def mul(args: list[Any]) -> float:
    return reduce(lambda a, b: a * b, _numbers("*", args), 1.0)


def div(args: list[Any]) -> float:
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums.insert(0, 1.0)
    try:
        return reduce(lambda a, b: a / b, nums)
    except ZeroDivisionError:
        raise EtaArithmeticError("/: division by zero") from None


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, test: Callable[[float, float], bool]) -> Callable[[list[Any]], bool]:
    def compare(args: list[Any]) -> bool:
        nums = _numbers(name, args)
        return all(test(a, b) for a, b in zip(nums, nums[1:]))
    return compare


lt = _chain("<", lambda a, b: a < b)
gt = _chain(">", lambda a, b: a > b)


# -------------------------------
# Boolean logic (only #f is false)
# -------------------------------
def logical_and(args: list[Any]) -> bool:
    return all(is_truthy(a) for a in args)


def logical_or(args: list[Any]) -> bool:
    return any(is_truthy(a) for a in args)


def logical_not(args: list[Any]) -> bool:
    return not is_truthy(args[0])


# -------------------------------
# List operations
# -------------------------------
def cons(args: list[Any]) -> Pair:
    head, tail = args
    return Pair(head, tail)


def car(args: list[Any]) -> Any:
    return _pair("car", args[0]).head


def cdr(args: list[Any]) -> Any:
    return _pair("cdr", args[0]).tail


# -------------------------------
# Equality and predicates
# -------------------------------
def equals(args: list[Any]) -> bool:
    return values_equal(args[0], args[1])


def not_equals(args: list[Any]) -> bool:
    return not equals(args)


def atom(args: list[Any]) -> bool:
    return not isinstance(args[0], Pair)


# name -> (function, min_args, max_args)
BUILTINS: dict[str, tuple[Callable[[list[Any]], Any], int, int | None]] = {
    "+": (add, 0, None),
    "-": (sub, 1, None),
    "*": (mul, 0, None),
    "/": (div, 1, None),
    "<": (lt, 2, None),
    ">": (gt, 2, None),
    "and": (logical_and, 0, None),
    "or": (logical_or, 0, None),
    "not": (logical_not, 1, 1),
    "cons": (cons, 2, 2),
    "car": (car, 1, 1),
    "cdr": (cdr, 1, 1),
    "eq": (equals, 2, 2),
    "neq": (not_equals, 2, 2),
    "atom": (atom, 1, 1),
}


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({
        Symbol(name): Builtin(name, fn, lo, hi)
        for name, (fn, lo, hi) in BUILTINS.items()
    })


def make_global_environment() -> Environment:
    """A fresh global frame holding the builtin table."""
    env = Environment()
    register(env)
    return env
