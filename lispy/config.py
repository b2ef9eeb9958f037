from __future__ import annotations
import logging
import os


_DEFAULT_PROMPT = "lispy> "
_DEFAULT_LOGLEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10000


def get_prompt() -> str:
    return os.environ.get("LISPY_PROMPT", _DEFAULT_PROMPT)


def get_log_level(override: str | None = None) -> int:
    """Resolve a logging level from `override` or LISPY_LOGLEVEL, defaulting to WARNING."""
    name = (override or os.environ.get("LISPY_LOGLEVEL") or _DEFAULT_LOGLEVEL).upper()
    level = getattr(logging, name, None)
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_recursion_limit() -> int:
    raw = os.environ.get("LISPY_RECURSION_LIMIT")
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    # sys.setrecursionlimit rejects tiny values
    return max(limit, 100)
