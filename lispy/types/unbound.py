from __future__ import annotations


class UnboundType:
    """Placeholder bound to a parameter name that received no argument."""

    _instance: UnboundType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<unbound>"


Unbound = UnboundType()
