import io

import pytest

from sable.config import EvalConfig
from sable.interpreter import default_environment, evaluate_sequence


@pytest.fixture
def out():
    """Captured output stream for the I/O primitives."""
    return io.StringIO()


@pytest.fixture
def env(out):
    """Fresh top-level environment with every primitive loaded."""
    return default_environment(EvalConfig(stdout=out))


@pytest.fixture
def run(env):
    """Evaluate source text against the shared `env` fixture."""
    def _run(source: str):
        return evaluate_sequence(source, env)
    return _run
