import pytest

from sprig.errors import SprigUnboundSymbol
from sprig.types import Environment, Context, Number, String


def test_define_is_persistent():
    base = Environment({"a": Number(1)})
    extended = base.define("b", Number(2))
    assert "b" in extended
    assert "b" not in base
    assert len(base) == 1
    assert len(extended) == 2


def test_define_overrides_without_touching_original():
    base = Environment({"a": Number(1)})
    shadowed = base.define("a", String("one"))
    assert shadowed.lookup("a") == String("one")
    assert base.lookup("a") == Number(1)


def test_bind_all_later_pairs_win():
    env = Environment().bind_all([("a", Number(1)), ("b", Number(2)), ("a", Number(3))])
    assert env.lookup("a") == Number(3)
    assert env.names() == ["a", "b"]


def test_lookup_absent_fails():
    with pytest.raises(SprigUnboundSymbol, match="symbol not found: ghost"):
        Environment().lookup("ghost")


def test_get_and_iteration():
    env = Environment({"a": Number(1)})
    assert env.get("a") == Number(1)
    assert env.get("z") is None
    assert list(env) == ["a"]
    assert dict(env.items()) == {"a": Number(1)}


def test_equality_by_contents():
    assert Environment({"a": Number(1)}) == Environment().define("a", Number(1))
    assert Environment({"a": Number(1)}) != Environment({"a": Number(2)})


def test_str_is_sorted_and_described():
    env = Environment({"b": String("s"), "a": Number(1)})
    assert str(env) == '{a: 1, b: "s"}'


def test_context_with_env_keeps_state():
    state = object()
    ctx = Context(Environment(), state)
    new_ctx = ctx.with_env(Environment({"a": Number(1)}))
    assert new_ctx.state is state
    assert new_ctx.env.lookup("a") == Number(1)
    assert len(ctx.env) == 0


def test_context_defaults():
    ctx = Context()
    assert len(ctx.env) == 0
    assert ctx.state is None
