from eta.types.symbol import Symbol
from eta.types.nil import Nil, NilType
from eta.types.environment import Environment, Unassigned
from eta.types.pair import Pair, make_list, iter_list
from eta.types.procedure import Closure, Builtin
from eta.types.predicates import is_number, is_truthy, values_equal
from eta.types.tail_call import TailCall

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "Environment",
    "Unassigned",
    "Pair",
    "make_list",
    "iter_list",
    "Closure",
    "Builtin",
    "is_number",
    "is_truthy",
    "values_equal",
    "TailCall",
]
