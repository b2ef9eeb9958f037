"""Render Lispy values back into s-expression text."""

from lispy import LispValue
from lispy.types.procedure import Procedure


def to_string(value: LispValue) -> str:
    """Convert a Python object back into a Lisp-readable string."""
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, Procedure):
        return str(value)
    if callable(value):
        return f"#<procedure {getattr(value, '__name__', '?')}>"
    return str(value)
