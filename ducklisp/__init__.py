# Core type aliases for the ducklisp data model.
# Values are plain Python objects where Python has a natural type (float, str, list)
# plus a handful of small classes (Symbol, Boolean, Lambda, NativeFunction).
# The same list type holds both code (forms) and runtime data.
#
# Naming guidance:
# - SExpression: use in reader and special-form code for unevaluated forms.
# - LispValue:   use in evaluator/runtime code for evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms: evaluate(expr, env)
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.3.0"
