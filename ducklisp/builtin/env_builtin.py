"""Built-in functions for the ducklisp runtime environment.

This module defines arithmetic, numeric comparison, list processing, logic
and output primitives, plus the `register` helper that installs them into
a global environment. Every primitive is called as fn(env, args) with
already-evaluated arguments.
"""
from __future__ import annotations

import sys
from functools import reduce
from typing import IO, Callable

from ducklisp import LispValue
from ducklisp.errors import ArgumentError, DivisionByZeroError
from ducklisp.printer import to_lisp_string
from ducklisp.types.boolean import Boolean, T, Nil, from_bool
from ducklisp.types.environment import Environment
from ducklisp.types.native import NativeFunction
from ducklisp.types.symbol import Symbol


def _is_number(x: LispValue) -> bool:
    # bool is an int subclass; host booleans are not Lisp numbers
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[LispValue]) -> list[float]:
    for a in args:
        if not _is_number(a):
            raise ArgumentError(f"{name} requires numeric arguments, got {to_lisp_string(a)}")
    return [float(a) for a in args]


def _require_list(name: str, x: LispValue) -> list:
    if not isinstance(x, list):
        raise ArgumentError(f"{name} requires a list argument, got {to_lisp_string(x)}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[LispValue]) -> float:
    """Return the sum of all arguments; 0 with no arguments."""
    return sum(_numbers("+", expr), 0.0)


def sub(env: Environment, expr: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not expr:
        raise ArgumentError("- requires at least 1 argument")
    nums = _numbers("-", expr)
    if len(nums) == 1:
        return -nums[0]
    return reduce(lambda a, b: a - b, nums)


def mul(env: Environment, expr: list[LispValue]) -> float:
    """Return the product of all arguments; 1 with no arguments."""
    result = 1.0
    for x in _numbers("*", expr):
        result *= x
    return result


def div(env: Environment, expr: list[LispValue]) -> float:
    """Divide left-to-right; with one arg returns the reciprocal.

    A zero divisor always raises DivisionByZeroError, never infinity.
    """
    if not expr:
        raise ArgumentError("/ requires at least 1 argument")
    nums = _numbers("/", expr)
    if len(nums) == 1:
        nums = [1.0] + nums
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise DivisionByZeroError("Division by zero")
        result /= x
    return result


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[float, float], bool]):
    def compare(env: Environment, expr: list[LispValue]) -> Boolean:
        if len(expr) < 2:
            raise ArgumentError(f"{name} requires at least 2 arguments")
        nums = _numbers(name, expr)
        return from_bool(all(op(a, b) for a, b in zip(nums, nums[1:])))
    compare.__doc__ = f"Chainable {name}: t if it holds for every adjacent pair."
    return compare


equals = _comparison("=", lambda a, b: a == b)
lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(expr)


def car(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the first element of a list; nil for the empty list."""
    if len(expr) != 1:
        raise ArgumentError("car requires exactly 1 argument")
    xs = _require_list("car", expr[0])
    return xs[0] if xs else Nil


def cdr(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return all but the first element; the empty list for lists of length <= 1."""
    if len(expr) != 1:
        raise ArgumentError("cdr requires exactly 1 argument")
    xs = _require_list("cdr", expr[0])
    return xs[1:]


def cons(env: Environment, expr: list[LispValue]) -> list[LispValue]:
    """Return a new list with head prepended to tail. Only proper lists are
    supported, so tail must already be a list."""
    if len(expr) != 2:
        raise ArgumentError("cons requires exactly 2 arguments")
    head, tail = expr
    if not isinstance(tail, list):
        raise ArgumentError("The second argument to cons must be a list")
    return [head] + tail


# -------------------------------
# Logic and output
# -------------------------------
def logical_not(env: Environment, expr: list[LispValue]) -> Boolean:
    """Negate a boolean; any non-boolean argument gives nil."""
    if len(expr) != 1:
        raise ArgumentError("not requires exactly 1 argument")
    val = expr[0]
    if isinstance(val, Boolean):
        return from_bool(not val.value)
    return Nil


def make_print(output: IO[str] | None = None):
    """Build the print primitive writing to `output` (stdout when None)."""

    def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
        """Print space-separated representations of args and a newline.

        Returns the last argument, or nil when called without arguments.
        """
        stream = output if output is not None else sys.stdout
        print(" ".join(to_lisp_string(a) for a in args), file=stream)
        return args[-1] if args else Nil

    return print_builtin


BUILTINS = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": equals,
    "<": lt,
    ">": gt,
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "not": logical_not,
}


def register(env: Environment, output: IO[str] | None = None) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update({Symbol(name): NativeFunction(name, fn) for name, fn in BUILTINS.items()})
    env.define(Symbol("print"), NativeFunction("print", make_print(output)))
    env.define(Symbol("nil"), Nil)
    env.define(Symbol("t"), T)
