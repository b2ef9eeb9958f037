"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to evaluated Lisp values and
supports nested lexical scopes via an `outer` link. Frames are shared, never
copied: every closure created in a frame and every child frame created from
it hold a reference to the same object, and Python's reference counting keeps
a frame alive for as long as anything still points at it.
"""

from __future__ import annotations

from io import StringIO
from itertools import zip_longest
from typing import Iterable, Mapping, Optional

from lispy import LispValue
from lispy.errors import LispyInvalidSymbol, LispyUnboundSymbol
from lispy.types.symbol import Symbol
from lispy.types.unbound import Unbound


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        names: Iterable[Symbol] = (),
        values: Iterable[LispValue] = (),
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Permissive zip: missing values bind to Unbound, surplus values are dropped
        for name, value in zip_longest(names, values, fillvalue=Unbound):
            if name is Unbound:
                break
            self.define(name, value)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Environment:
        """Find the nearest environment in the chain that binds `name`.

        Raises LispyUnboundSymbol once the root frame has been searched.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        raise LispyUnboundSymbol(f"Unbound symbol {name}")

    def get(self, name: Symbol) -> LispValue:
        """Read the binding of `name` held directly by this frame."""
        try:
            return self.vars[name]
        except KeyError:
            raise LispyUnboundSymbol(f"Unbound symbol {name}") from None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Never creates a binding; raises LispyUnboundSymbol if none exists.
        """
        self.find(name).vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name` anywhere in the chain."""
        return self.find(name).get(name)

    def update(self, mapping: Mapping[Symbol | str, LispValue]) -> None:
        """Bulk-define a mapping of names to values in the current frame."""
        for k, v in mapping.items():
            self.define(Symbol(k) if isinstance(k, str) else k, v)

    def __contains__(self, name: object) -> bool:
        try:
            self.find(name)  # type: ignore[arg-type]
        except LispyUnboundSymbol:
            return False
        return True

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
