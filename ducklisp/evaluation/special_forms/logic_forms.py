from ducklisp import SExpression, LispValue, EvaluatorFn
from ducklisp.types.boolean import T, Nil, is_truthy
from ducklisp.types.environment import Environment


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until a falsy value
    (nil) is found, which is returned immediately. If all operands are truthy,
    returns the value of the last operand. With zero operands, returns t.
    """
    result: LispValue = T
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_truthy(result):
            return result
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) returns the first truthy operand value, evaluating
    left-to-right. If none are truthy (or there are none), returns nil.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_truthy(val):
            return val
    return Nil
