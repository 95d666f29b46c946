from __future__ import annotations


class Boolean:
    """The two truth values. The false value doubles as nil.

    Only the module-level instances `T` and `Nil` should ever exist; use
    `from_bool` to convert a Python bool.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def __bool__(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self):
        return hash(("Boolean", self.value))

    def __repr__(self):
        return "t" if self.value else "nil"


T = Boolean(True)
Nil = Boolean(False)


def from_bool(flag: bool) -> Boolean:
    return T if flag else Nil


def is_truthy(value) -> bool:
    """Only Nil is false; 0, "" and the empty list are all true."""
    return not (isinstance(value, Boolean) and not value.value)
