from ducklisp import SExpression, LispValue, EvaluatorFn
from ducklisp.errors import ArgumentError
from ducklisp.types.boolean import Nil, is_truthy
from ducklisp.types.environment import Environment


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (test expr...) ...).

    For each clause in order, evaluate the test; on the first truthy test,
    evaluate the clause body sequentially and return the last value. A
    clause with only a test returns the test's value. If no clause matches,
    return nil.
    """
    for clause in tail:
        if not isinstance(clause, list):
            raise ArgumentError(f"cond clauses must be lists, got {clause!r}")
        if not clause:
            raise ArgumentError("cond clauses cannot be empty")

        test_val = evaluate_fn(clause[0], env)
        if not is_truthy(test_val):
            continue
        result = test_val
        for expr in clause[1:]:
            result = evaluate_fn(expr, env)
        return result

    return Nil
