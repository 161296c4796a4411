import pytest

from eta.errors import EtaTypeError, EtaUnboundSymbol
from eta.types.environment import Environment, Unassigned
from eta.types.symbol import Symbol

a, b = Symbol("a"), Symbol("b")


def test_define_and_lookup():
    env = Environment()
    env.define(a, 1.0)
    assert env.lookup(a) == 1.0


def test_lookup_walks_outward():
    outer = Environment()
    outer.define(a, 1.0)
    inner = Environment(outer=outer)
    inner.define(b, 2.0)
    assert inner.lookup(a) == 1.0
    assert inner.lookup(b) == 2.0
    with pytest.raises(EtaUnboundSymbol):
        outer.lookup(b)


def test_inner_binding_shadows_outer():
    outer = Environment()
    outer.define(a, 1.0)
    inner = Environment(outer=outer)
    inner.define(a, 2.0)
    assert inner.lookup(a) == 2.0
    assert outer.lookup(a) == 1.0


def test_redefine_overwrites_in_frame():
    env = Environment()
    env.define(a, 1.0)
    env.define(a, 2.0)
    assert env.lookup(a) == 2.0
    assert len(env.vars) == 1


def test_find_returns_owning_frame():
    outer = Environment()
    outer.define(a, 1.0)
    inner = Environment(outer=outer)
    assert inner.find(a) is outer
    assert inner.find(b) is None
    assert a in inner and b not in inner


def test_placeholder_falls_through_to_outer_binding():
    outer = Environment()
    outer.define(a, 1.0)
    inner = Environment(outer=outer)
    inner.define(a, Unassigned)
    assert inner.lookup(a) == 1.0


def test_placeholder_alone_is_unbound():
    env = Environment()
    env.define(a, Unassigned)
    with pytest.raises(EtaUnboundSymbol, match="before its value"):
        env.lookup(a)


def test_remove():
    env = Environment()
    env.define(a, 1.0)
    env.remove(a)
    env.remove(b)
    assert a not in env


def test_define_requires_symbol():
    with pytest.raises(EtaTypeError):
        Environment().define("a", 1.0)


def test_update_and_repr():
    outer = Environment()
    outer.update({a: 1.0})
    inner = Environment(outer=outer)
    inner.update({b: 2.0})
    assert str(inner) == "{b: 2.0} -> ..."
    assert repr(inner) == "<Environment chain: {b: 2.0} -> {a: 1.0}>"
