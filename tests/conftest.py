import pytest

from quill.builtin import core_builtin
from quill.types.environment import GlobalEnvironment


# Every test starts from the default call depth limit. Tests that need a
# different limit set QUILL_MAX_CALL_DEPTH through monkeypatch themselves.
@pytest.fixture(autouse=True)
def _default_call_depth(monkeypatch):
    monkeypatch.delenv("QUILL_MAX_CALL_DEPTH", raising=False)


@pytest.fixture
def top_level():
    """A top-level scope with the builtin library registered."""
    env = GlobalEnvironment()
    core_builtin.register(env)
    return env

