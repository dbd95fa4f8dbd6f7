import pytest

from sprig.types import Environment, Context, Number, SideEffector
from sprig.builtin import env_builtin


# Host state used across tests: an immutable tuple standing in for a
# host-owned world value. Side effectors replace it, nothing mutates it.
INITIAL_STATE = ("world", 0)


def host_tick(args, ctx):
    """Side effector: bump the host counter and record the tick in the env."""
    name, count = ctx.state
    new_state = (name, count + 1)
    env = ctx.env.define("ticks", Number(count + 1))
    return Context(env, new_state), Number(count + 1)


@pytest.fixture
def env():
    env = Environment()
    env = env.define("x", Number(42))
    env = env.define("y", Number(100))
    env = env.define("tick", SideEffector(host_tick, "tick"))
    return env


@pytest.fixture
def ctx(env):
    return Context(env, INITIAL_STATE)


@pytest.fixture
def std_ctx(env):
    return Context(env_builtin.register(env), INITIAL_STATE)
