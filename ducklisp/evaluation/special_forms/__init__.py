"""Registry of special forms for the ducklisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation
rules. `register` binds each handler in an environment as a special
NativeFunction, so the evaluator finds them by ordinary lookup and passes
their operands unevaluated.
"""

from functools import partial

from ducklisp import EvaluatorFn
from ducklisp.types.environment import Environment
from ducklisp.types.native import NativeFunction
from ducklisp.types.symbol import Symbol
from ducklisp.evaluation.special_forms.logic_forms import and_form, or_form
from ducklisp.evaluation.special_forms.define_form import defvar_form, defun_form
from ducklisp.evaluation.special_forms.set_form import setq_form
from ducklisp.evaluation.special_forms.lambda_form import lambda_form
from ducklisp.evaluation.special_forms.if_form import if_form
from ducklisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("defvar"): defvar_form,
    Symbol("setq"): setq_form,
    Symbol("defun"): defun_form,
    Symbol("lambda"): lambda_form,
    Symbol("if"): if_form,
    Symbol("cond"): cond_form,
}

# Forms that build closures and so need to know the arity policy
CLOSURE_FORMS = {Symbol("defun"), Symbol("lambda")}


def _bind(form, evaluate_fn: EvaluatorFn):
    def handler(env: Environment, tail: list):
        return form(tail, env, evaluate_fn)
    return handler


def register(env: Environment, evaluate_fn: EvaluatorFn, strict_arity: bool = False) -> None:
    """Bind every special form in `env`."""
    for sym, form in SPECIAL_FORMS.items():
        if sym in CLOSURE_FORMS:
            form = partial(form, strict_arity=strict_arity)
        env.define(sym, NativeFunction(sym.name, _bind(form, evaluate_fn), special=True))
