"""Application engine for Lispy.

Centralizes procedure application for the evaluator and for primitives that
call back into user code (`apply`, `map`):

- User-defined Procedures are called directly; the errors they raise are
  already Lispy errors and propagate unchanged.
- Python primitives are called positionally. Host exceptions caused by a bad
  argument shape or type are re-raised as LispyApplicationError, chained to
  the original.
"""

from lispy import LispValue
from lispy.errors import LispyApplicationError, LispyError
from lispy.printer import to_string
from lispy.types.procedure import Procedure

# Host failures that mean "this primitive rejected its arguments"
PRIMITIVE_FAILURES = (TypeError, ValueError, ArithmeticError, IndexError, AttributeError)


def apply_procedure(fn: LispValue, args: list[LispValue]) -> LispValue:
    """Apply either a Procedure or a Python callable to already-evaluated args."""
    if isinstance(fn, Procedure):
        return fn(*args)
    if not callable(fn):
        raise LispyApplicationError(f"{to_string(fn)} is not a procedure")
    try:
        return fn(*args)
    except LispyError:
        raise
    except PRIMITIVE_FAILURES as exc:
        name = getattr(fn, "__name__", repr(fn))
        raise LispyApplicationError(f"{name}: {exc}") from exc
