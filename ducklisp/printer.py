"""Printed representation of ducklisp values.

The printed form of numbers, booleans, strings and lists can be fed back to
the reader and yields an equal value. Functions print as an opaque
`#<...>` descriptor that the reader does not accept back.
"""

from __future__ import annotations

import math

from ducklisp import LispValue
from ducklisp.types.boolean import Boolean
from ducklisp.types.symbol import Symbol


def format_number(value: float) -> str:
    """Integer-valued numbers print without a decimal point.

    Infinities print as Infinity / -Infinity, which the reader accepts.
    """
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_lisp_string(value: LispValue) -> str:
    match value:
        case Boolean():
            return "t" if value.value else "nil"
        case bool():
            # Host booleans should never leak in, but print them sensibly
            return "t" if value else "nil"
        case int() | float():
            return format_number(value)
        case str():
            return f'"{value}"'
        case Symbol():
            return value.name
        case list():
            return "(" + " ".join(to_lisp_string(v) for v in value) + ")"
        case _:
            return repr(value)
