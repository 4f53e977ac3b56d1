import pytest

from conslisp.builtin.env_builtin import standard_scope
from conslisp.types.scope import Scope


@pytest.fixture
def scope():
    """Return a fresh global scope with the standard builtins for each test."""
    return standard_scope()


@pytest.fixture
def bare_scope():
    """Return an empty scope: no special forms, no procedures."""
    return Scope()
