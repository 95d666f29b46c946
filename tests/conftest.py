import pytest

from ducklisp.builtin.env_builtin import register
from ducklisp.evaluation.evaluator import evaluate
from ducklisp.evaluation.special_forms import register as register_special_forms
from ducklisp.interpreter import Interpreter
from ducklisp.types.environment import Environment


# Settings read from DUCKLISP_* variables must not leak in from the shell
# running the tests.
@pytest.fixture(autouse=True)
def _clean_ducklisp_env(monkeypatch):
    for var in (
        "DUCKLISP_HOST",
        "DUCKLISP_PORT",
        "DUCKLISP_STRICT_ARITY",
        "DUCKLISP_LOG_LEVEL",
        "DUCKLISP_PROMPT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def env():
    """Fresh global environment with builtins and special forms loaded."""
    e = Environment()
    register(e)
    register_special_forms(e, evaluate)
    return e


@pytest.fixture
def interp():
    """Fresh lenient interpreter; state persists only within one test."""
    return Interpreter(strict_arity=False)


@pytest.fixture
def run(interp):
    """Evaluate a sequence of lines in one session and return the last printed result."""
    def _run(*lines):
        result = None
        for line in lines:
            result = interp.eval_to_string(line)
        return result
    return _run
