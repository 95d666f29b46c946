"""Lexical environments for ducklisp.

An Environment maps Symbols to evaluated values and links to an optional
`outer` scope. Links only ever point from a child to its parent, so chains
never form cycles and are reclaimed as soon as no closure or active call
refers to them.
"""

from __future__ import annotations

from typing import Optional

from ducklisp import LispValue
from ducklisp.errors import ArgumentError, UnboundSymbolError
from ducklisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Create or overwrite the binding for `name` in this frame.

        Raises ArgumentError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise ArgumentError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def is_defined(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update the nearest existing binding for `name`.

        Never creates a binding. Raises UnboundSymbolError if `name` is not
        bound anywhere in the chain.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value of the nearest binding for `name`.

        Raises UnboundSymbolError if the symbol is not bound.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Unbound symbol: {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment {len(self.vars)} bindings, depth {depth}>"
