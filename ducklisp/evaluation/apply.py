"""Application engine for ducklisp.

Centralizes how a callable value receives its arguments:
- Lambda (user closures): a fresh child of the closure's environment binds
  the formals, then the body forms run in order.
- NativeFunction: the host procedure is called with the caller's env.
"""

from __future__ import annotations

from ducklisp import LispValue
from ducklisp.errors import ApplyError, ArgumentError
from ducklisp.types.environment import Environment
from ducklisp.types.lambda_fn import Lambda
from ducklisp.types.symbol import Symbol


def bind_arguments(fn: Lambda, args: list[LispValue]) -> Environment:
    """Bind `args` to the formals of `fn` in a new child of `fn.env`.

    Binding is positional over min(len(formals), len(args)). Lenient
    functions drop extra arguments and leave missing formals unbound, so
    they fail only when the body looks them up. Strict functions reject
    any count mismatch up front.
    """
    formals = fn.formals
    if fn.strict and len(args) != len(formals):
        raise ArgumentError(
            f"{fn.name or 'lambda'} expects {len(formals)} argument(s), got {len(args)}"
        )

    new_env = Environment(outer=fn.env)
    for param, value in zip(formals, args):
        if not isinstance(param, Symbol):
            raise ArgumentError(f"Function parameters must be symbols, got {param!r}")
        new_env.define(param, value)
    return new_env


def apply_lambda(fn: Lambda, args: list[LispValue]) -> LispValue:
    """Run the body of `fn` with `args`; the value of the last form wins."""
    # Imported here: the evaluator imports this module
    from ducklisp.evaluation.evaluator import evaluate

    new_env = bind_arguments(fn, args)
    result: LispValue = None
    for form in fn.body:
        result = evaluate(form, new_env)
    return result


def apply(head: object, args: list[LispValue], env: Environment) -> LispValue:
    """Apply a Lambda or NativeFunction to already-evaluated arguments."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args)
    if hasattr(head, "apply"):
        return head.apply(args, env)
    raise ApplyError(f"not callable: {head!r}")
