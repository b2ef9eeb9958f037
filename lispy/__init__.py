# Core type aliases for Lispy's data model.
# Plain Python types represent both code (forms) and runtime values:
# numbers are int/float, symbols are Symbol, lists are Python lists.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to special form handlers
EvaluatorFn = Callable[..., LispValue]
