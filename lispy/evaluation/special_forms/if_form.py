from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.errors import LispyArityError
from lispy.types.environment import Environment


def is_true(value: LispValue) -> bool:
    """Lisp truthiness: only #f is false; 0 and () are true."""
    return value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test conseq [alt])
    Only the selected branch is evaluated.
    """
    if len(tail) not in (2, 3):
        raise LispyArityError("if requires a test, a consequent and an optional alternative")

    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return None
