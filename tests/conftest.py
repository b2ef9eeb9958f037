import pytest

from lispy.builtin.env_builtin import standard_env
from lispy.interpreter import Interpreter


@pytest.fixture
def env():
    """A fresh global environment with the math library and primitives installed."""
    return standard_env()


@pytest.fixture
def interp():
    """A fresh interpreter; definitions persist across eval() calls within a test."""
    return Interpreter()
