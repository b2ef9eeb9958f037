from lispy.errors import LispyArityError, LispyInvalidSymbol
from lispy.types.procedure import Procedure

from lispy import EvaluatorFn
from lispy import SExpression, LispValue
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body) takes a single body expression;
    # sequencing is done with the begin primitive.
    if len(tail) != 2:
        raise LispyArityError("lambda requires a parameter list and exactly one body")

    params, body = tail
    if not isinstance(params, list):
        raise LispyInvalidSymbol(f"lambda parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise LispyInvalidSymbol(f"lambda parameter must be a Symbol, got {p}")

    return Procedure(params, body, env)
