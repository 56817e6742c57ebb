import io

import pytest

from scheep.builtin.env_builtin import make_global_environment
from scheep.builtin.primitives import make_primitive_table
from scheep.interpreter import Interpreter


@pytest.fixture
def output():
    """Captures what display/newline write."""
    return io.StringIO()


@pytest.fixture
def env(output):
    """A fresh global environment with the primitive library and true/false."""
    return make_global_environment(make_primitive_table(output))


@pytest.fixture
def interp(output):
    """Interpreter with the packaged prelude loaded."""
    return Interpreter(output=output)
