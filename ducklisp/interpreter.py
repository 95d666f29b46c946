from __future__ import annotations

from contextlib import contextmanager
from typing import IO

from ducklisp import LispValue
from ducklisp import config
from ducklisp.builtin.env_builtin import register
from ducklisp.errors import LispError, StackExhaustionError
from ducklisp.evaluation.evaluator import evaluate
from ducklisp.evaluation.special_forms import register as register_special_forms
from ducklisp.printer import to_lisp_string
from ducklisp.reader.parser import read
from ducklisp.types.environment import Environment


@contextmanager
def _host_stack_guard():
    """Re-raise Python's RecursionError as StackExhaustionError."""
    try:
        yield
    except RecursionError as ex:
        if isinstance(ex, StackExhaustionError):
            raise
        raise StackExhaustionError("Maximum recursion depth exceeded") from ex


class Interpreter:
    """
    Reads and evaluates one expression at a time against its own global
    Environment. Definitions persist across eval() calls on the same
    instance; separate instances never share bindings.
    """

    def __init__(self, *, strict_arity: bool | None = None, output: IO[str] | None = None):
        if strict_arity is None:
            strict_arity = config.get_strict_arity()
        self.strict_arity = strict_arity
        self.env: Environment = Environment()
        register(self.env, output)
        register_special_forms(self.env, evaluate, strict_arity=strict_arity)

    def eval(self, code: str) -> LispValue:
        """Evaluate the first expression in `code` and return its value.

        Raises a LispError subclass on failure, including
        StackExhaustionError when nesting outgrows the host stack.
        """
        with _host_stack_guard():
            return evaluate(read(code), self.env)

    def eval_to_string(self, code: str) -> str:
        """Evaluate `code` and return the printed form of its value.

        Printing a deeply nested value can also exhaust the stack; that
        surfaces as StackExhaustionError like an evaluation failure.
        """
        value = self.eval(code)
        with _host_stack_guard():
            return to_lisp_string(value)


def create_interpreter(**options) -> Interpreter:
    return Interpreter(**options)


def evaluate_source(code: str, **options) -> str:
    """One-shot evaluation with a fresh interpreter.

    Returns the printed value, or "Error: <message>" if evaluation fails.
    """
    try:
        return create_interpreter(**options).eval_to_string(code)
    except LispError as ex:
        return f"Error: {ex}"
