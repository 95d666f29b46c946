from ducklisp import EvaluatorFn
from ducklisp import SExpression, LispValue
from ducklisp.errors import ArgumentError
from ducklisp.types.environment import Environment
from ducklisp.types.symbol import Symbol


def setq_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(setq name value): assign to an existing binding anywhere in the chain."""
    if len(tail) != 2:
        raise ArgumentError("setq requires exactly 2 arguments: (setq name value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise ArgumentError(f"setq first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return value
