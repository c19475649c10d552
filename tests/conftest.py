import pytest

from sable.types.environment import create_empty
from sable.types.values import Integer, Str, Symbol


@pytest.fixture
def env():
    """Return a fresh root environment for each test."""
    return create_empty()


@pytest.fixture
def populated_env(env):
    """An environment with a few bindings already in place."""
    env.bind(Symbol("x"), Integer(42))
    env.bind(Symbol("y"), Integer(100))
    env.bind(Symbol("greeting"), Str("hello"))
    return env


@pytest.fixture
def shallow_depth(monkeypatch):
    """Lower the nesting bound so depth checks are cheap to hit."""
    monkeypatch.setenv("SABLE_MAX_DEPTH", "5")
    return 5
