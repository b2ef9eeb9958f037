from __future__ import annotations
from typing import Callable

from lispy import SExpression, LispValue
from lispy.reader.parser import parse
from lispy.types.environment import Environment
from lispy.builtin.env_builtin import standard_env


class Interpreter:
    """
    Reads and evaluates Lispy code one line at a time.
    Keeps a single global Environment alive across calls, so definitions persist.
    """

    def __init__(
        self,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
        env: Environment | None = None,
    ):
        if eval_fn is None:
            from lispy.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = env if env is not None else standard_env()

    def eval(self, code: str) -> LispValue:
        """Parse one expression from `code` and evaluate it in the global environment."""
        return self.eval_fn(parse(code), self.env)
