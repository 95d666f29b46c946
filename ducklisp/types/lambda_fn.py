"""User-defined functions (closures) for ducklisp."""

from __future__ import annotations

import logging
from io import StringIO

from ducklisp import LispValue, SExpression
from ducklisp.types.environment import Environment
from ducklisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Lambda:
    """A closure: formal parameters, body forms and the defining environment.

    `env` is the live defining scope, not a copy, so later changes to
    bindings in that scope are seen by the body.
    """

    __slots__ = ("formals", "body", "env", "strict", "name")

    special = False

    def __init__(
        self,
        formals: list[Symbol],
        body: list[SExpression],
        env: Environment,
        strict: bool = False,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.body: list[SExpression] = body
        self.env: Environment = env
        self.strict = strict
        self.name = name
        logger.debug(
            "closure created: name=%s params=%d body_forms=%d",
            name or "<lambda>",
            len(formals),
            len(body),
        )

    def apply(self, args: list[LispValue], caller_env: Environment | None = None) -> LispValue:
        """Call the function with already-evaluated arguments.

        caller_env is unused: the body always runs in a child of self.env.
        """
        from ducklisp.evaluation.apply import apply_lambda
        return apply_lambda(self, args)

    def __str__(self) -> str:
        from ducklisp.printer import to_lisp_string
        with StringIO() as buffer:
            buffer.write("#<FUNCTION ")
            buffer.write(to_lisp_string(self.formals))
            buffer.write(" ")
            buffer.write(to_lisp_string(self.body))
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
