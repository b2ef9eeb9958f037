from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyInvalidSymbol, LispyArityError
from lispy.types.symbol import Symbol
from lispy.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise LispyArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispyInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym}")
    from lispy.evaluation.special_forms import is_keyword
    if is_keyword(var_sym):
        raise LispyInvalidSymbol(f"Cannot set! reserved keyword {var_sym}")
    value = evaluate_fn(val_expr, env)
    # Mutates the nearest existing binding; never creates one
    env.set(var_sym, value)
    return None
