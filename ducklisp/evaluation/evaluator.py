"""Core evaluator for the ducklisp interpreter.

Plain recursive evaluation: no macro expansion, no trampoline. Python's
own call stack mirrors the nesting depth of the source.
"""

from __future__ import annotations

from ducklisp import SExpression, LispValue
from ducklisp.errors import ApplyError
from ducklisp.evaluation.apply import apply
from ducklisp.types.environment import Environment
from ducklisp.types.lambda_fn import Lambda
from ducklisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one expression in `env` and return its value.

    Symbols are looked up, non-empty lists are applications, and every
    other value (numbers, strings, booleans, functions, the empty list)
    evaluates to itself.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case [head, *tail_args]:
            if isinstance(head, Symbol):
                fn = env.lookup(head)
                if getattr(fn, "special", False):
                    # Special forms see their operands unevaluated
                    return fn.apply(tail_args, env)
                if not hasattr(fn, "apply"):
                    raise ApplyError(f"not callable: {head} is bound to a non-function value")
            else:
                fn = evaluate(head, env)
                if not isinstance(fn, Lambda):
                    raise ApplyError("not callable: head of the list is not a function")

            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env)

    # --- Atoms (and the empty list) return as-is ---
    return expr
