from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise LispyArityError("quote expects exactly 1 argument")
    return tail[0]
