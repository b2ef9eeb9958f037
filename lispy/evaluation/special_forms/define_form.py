from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError, LispyInvalidSymbol
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame only; the result is not printable.
    """
    if len(tail) != 2:
        raise LispyArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LispyInvalidSymbol(f"define first argument must be a Symbol, got {name}")
    # Lazy import: the registry imports this module
    from lispy.evaluation.special_forms import is_keyword
    if is_keyword(name):
        raise LispyInvalidSymbol(f"Cannot define reserved keyword {name}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return None
