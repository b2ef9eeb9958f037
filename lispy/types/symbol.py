"""Symbol atoms produced by the reader.

A Symbol is any token that does not read as a number: `+`, `list?`, `set!`,
`make-account`. Symbols compare and hash by name, so two readings of the same
token are interchangeable as environment keys and under `eq?`.
"""

from __future__ import annotations
import sys


class Symbol:
    """A named atom; evaluates to the value bound to its name."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned: environment lookups hash and compare the same str object
        self.id: str = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Symbol({self.id!r})"

    def __str__(self) -> str:
        """The literal token text, as the printer renders it."""
        return self.id
