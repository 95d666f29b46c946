from ducklisp import EvaluatorFn
from ducklisp import SExpression, LispValue
from ducklisp.errors import ArgumentError
from ducklisp.types.environment import Environment
from ducklisp.types.lambda_fn import Lambda
from ducklisp.types.symbol import Symbol


def defvar_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (defvar name value)
    Binds in the caller's own frame, shadowing any outer binding, and
    returns the value.
    """
    if len(tail) != 2:
        raise ArgumentError("defvar requires exactly 2 arguments: (defvar name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise ArgumentError(f"defvar first argument must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    strict_arity: bool = False,
) -> LispValue:
    """
    (defun name (params...) body...)
    The closure captures the defining environment, and the name is bound in
    that same environment so the body can call itself recursively.
    """
    if len(tail) < 3:
        raise ArgumentError("defun requires a name, a parameter list and at least one body form")

    name, params, *body = tail
    if not isinstance(name, Symbol):
        raise ArgumentError(f"defun name must be a symbol, got {name!r}")
    if not isinstance(params, list):
        raise ArgumentError(f"defun parameters must be a list, got {params!r}")

    env.define(name, Lambda(params, body, env, strict=strict_arity, name=name.name))
    return name
