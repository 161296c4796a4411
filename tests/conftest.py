import pytest

from eta.builtins import make_global_environment
from eta.evaluation.evaluator import evaluate
from eta.interpreter import Interpreter
from eta.reader.parser import parse


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return make_global_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form in source against `env`, returning the last value."""
    def _run(source: str):
        result = None
        for form in parse(source):
            result = evaluate(form, env)
        return result
    return _run
