"""Core evaluator for the Lispy interpreter.

Plain recursive evaluation: symbols are resolved through the environment
chain, other atoms evaluate to themselves, and compound forms are either
special forms (dispatched through SPECIAL_FORMS) or procedure applications
with arguments evaluated left to right.
"""

from __future__ import annotations

from lispy import SExpression, LispValue
from lispy.errors import LispyApplicationError, LispyUnboundSymbol
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.unbound import Unbound
from lispy.evaluation.apply import apply_procedure
from lispy.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate an expression in an environment."""
    if isinstance(expr, Symbol):
        value = env.find(expr).get(expr)
        if value is Unbound:
            raise LispyUnboundSymbol(f"Unassigned variable {expr}")
        return value

    if not isinstance(expr, list):
        # Numbers and other constants are self-evaluating
        return expr

    match expr:
        case []:
            raise LispyApplicationError("Cannot evaluate an empty combination ()")
        case [Symbol() as head, *tail_args] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)
        case [head, *tail_args]:
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply_procedure(fn, args)
