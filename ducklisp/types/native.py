from __future__ import annotations

from typing import Callable

from ducklisp import LispValue
from ducklisp.types.environment import Environment

# Host procedures are called as fn(env, args)
NativeFn = Callable[[Environment, list], LispValue]


class NativeFunction:
    """A named host procedure exposed to Lisp code.

    With special=True the evaluator passes the operand expressions
    unevaluated, which is how special forms like `if` and `defun` are bound
    in the global environment.
    """

    __slots__ = ("name", "fn", "special")

    def __init__(self, name: str, fn: NativeFn, special: bool = False):
        self.name = name
        self.fn = fn
        self.special = special

    def apply(self, args: list[LispValue], env: Environment) -> LispValue:
        return self.fn(env, args)

    def __repr__(self):
        kind = "SPECIAL-FORM" if self.special else "NATIVE-FUNCTION"
        return f"#<{kind} {self.name}>"
