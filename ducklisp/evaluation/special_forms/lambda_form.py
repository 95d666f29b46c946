from ducklisp import EvaluatorFn
from ducklisp import SExpression, LispValue
from ducklisp.errors import ArgumentError
from ducklisp.types.environment import Environment
from ducklisp.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    strict_arity: bool = False,
) -> LispValue:
    # (lambda (params) body...) needs at least one body form; several forms
    # run in order and the last one gives the result.
    if len(tail) < 2:
        raise ArgumentError("lambda requires a parameter list and at least one body form")

    params, *body = tail
    if not isinstance(params, list):
        raise ArgumentError(f"lambda parameters must be a list, got {params!r}")

    return Lambda(params, body, env, strict=strict_arity)
