"""User-defined procedure (closure) representation for Lispy."""

from __future__ import annotations

from io import StringIO

from lispy import SExpression, LispValue
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


class Procedure:
    """A first-class closure with formal parameters, one body, and its defining env."""

    __slots__ = ("parms", "body", "env")

    def __init__(self, parms: list[Symbol], body: SExpression, env: Environment):
        self.parms: tuple[Symbol, ...] = tuple(parms)
        self.body: SExpression = body
        # Captured by reference; later mutations of the defining scope are visible here
        self.env: Environment = env

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a fresh frame binding the formals to `args`, chained to the captured env."""
        return Environment(self.parms, args, self.env)

    def __call__(self, *args: LispValue) -> LispValue:
        # Imported here: the evaluator itself builds Procedures
        from lispy.evaluation.evaluator import evaluate
        return evaluate(self.body, self.extend_env(list(args)))

    def __str__(self) -> str:
        from lispy.printer import to_string
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.parms))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the procedure."""
        return str(self)
