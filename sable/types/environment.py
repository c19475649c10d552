"""Runtime environment for Sable.

The Environment stores bindings of Symbols to Values and supports nested
scopes via an `outer` link. The driver creates the root with
`create_empty()` and owns it; the evaluator only borrows it.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from sable.types.errors import SableInvalidSymbol, SableUnboundSymbol
from sable.types.values import Symbol, Value


class Environment:
    """Hierarchical mapping from Symbols to Values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, Value] = {}
        self.outer: Environment | None = outer

    def extend(self) -> Environment:
        """Return a fresh child scope whose parent is this environment."""
        return Environment(outer=self)

    def bind(self, name: Symbol, value: Value) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises SableInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SableInvalidSymbol(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: Value) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SableUnboundSymbol if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise SableUnboundSymbol(f"Cannot set unbound variable {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> Value:
        """Look up the value bound to `name`, innermost scope first.

        Raises SableUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise SableUnboundSymbol(f"Unbound variable {name}")
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, Value]) -> None:
        """Bulk-bind a mapping of Symbol -> Value in the current frame."""
        for k, v in mapping.items():
            self.bind(k, v)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            frames = []
            while env is not None:
                frame = StringIO()
                env._write_vars(frame)
                frames.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()


def create_empty() -> Environment:
    """A root environment with zero bindings."""
    return Environment()
