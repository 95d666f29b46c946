from ducklisp import EvaluatorFn
from ducklisp import SExpression, LispValue
from ducklisp.errors import ArgumentError
from ducklisp.types.boolean import Nil, is_truthy
from ducklisp.types.environment import Environment


def if_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) not in (2, 3):
        raise ArgumentError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
