"""Built-in functions for the Lispy runtime environment.

This module defines arithmetic, comparison, list processing, predicates and
application helpers, and `standard_env()`, which installs them together with
every public name of Python's `math` module into a fresh global Environment.

Primitives are plain positional Python callables, the same calling convention
as the functions of the `math` module, so both can be installed side by side
and user-defined Procedures can be passed to `map` and `apply`.
"""
from __future__ import annotations

import math
from numbers import Number

from lispy import LispValue
from lispy.evaluation.apply import apply_procedure
from lispy.evaluation.special_forms.if_form import is_true
from lispy.printer import to_string
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol


def is_number(x: LispValue) -> bool:
    return isinstance(x, Number) and not isinstance(x, bool)


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def add(x, y):
    """Binary addition."""
    return x + y


def sub(x, y):
    return x - y


def mul(x, y):
    return x * y


def div(x, y):
    """True division; (/ 7 2) is 3.5."""
    return x / y


def gt(x, y) -> bool:
    return x > y


def lt(x, y) -> bool:
    return x < y


def gte(x, y) -> bool:
    return x >= y


def lte(x, y) -> bool:
    return x <= y


def num_eq(x, y) -> bool:
    return x == y


def expt(base, power):
    """(expt b p) => b raised to the power p."""
    return base ** power


# -------------------------------
# Lists
# -------------------------------
def append(x: list, y: list) -> list:
    """Concatenate two lists into a new list."""
    if not isinstance(x, list) or not isinstance(y, list):
        raise TypeError("append expects two lists")
    return x + y


def car(x: list) -> LispValue:
    """First element of a non-empty list."""
    if not isinstance(x, list):
        raise TypeError(f"car expects a list, got {to_string(x)}")
    return x[0]


def cdr(x: list) -> list:
    """All but the first element of a list."""
    if not isinstance(x, list):
        raise TypeError(f"cdr expects a list, got {to_string(x)}")
    return x[1:]


def cons(x: LispValue, y: list) -> list:
    """Prepend x to the list y."""
    if not isinstance(y, list):
        raise TypeError(f"cons expects a list as its second argument, got {to_string(y)}")
    return [x, *y]


def length(x: list) -> int:
    return len(x)


def make_list(*items: LispValue) -> list:
    return list(items)


def begin(*values: LispValue) -> LispValue:
    """Arguments are already evaluated left to right; return the last one."""
    return values[-1] if values else None


def apply_(proc, args: list) -> LispValue:
    """(apply f '(a b)) => (f a b)"""
    if not isinstance(args, list):
        raise TypeError(f"apply expects a list of arguments, got {to_string(args)}")
    return apply_procedure(proc, args)


def map_(proc, items: list) -> list:
    """Apply a unary procedure to each element, preserving order."""
    if not isinstance(items, list):
        raise TypeError(f"map expects a list, got {to_string(items)}")
    return [apply_procedure(proc, [item]) for item in items]


# -------------------------------
# Equality
# -------------------------------
def is_eq(a: LispValue, b: LispValue) -> bool:
    """Identity comparison; numbers and symbols have no identity beyond their value."""
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a == b
    return a is b


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for lists."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


# -------------------------------
# Predicates
# -------------------------------
def logical_not(x: LispValue) -> bool:
    """Logical NOT; only #f is false."""
    return not is_true(x)


def is_list(x: LispValue) -> bool:
    return isinstance(x, list)


def is_null(x: LispValue) -> bool:
    return isinstance(x, list) and not x


def is_procedure(x: LispValue) -> bool:
    return callable(x)


def is_symbol(x: LispValue) -> bool:
    return isinstance(x, Symbol)


def print_(x: LispValue) -> None:
    """Write the rendered value to stdout; the result is not printable."""
    print(to_string(x))
    return None


def math_table() -> dict[str, LispValue]:
    """Every public name of the math module, plus the host numeric helpers it lacks."""
    table: dict[str, LispValue] = {
        name: value for name, value in vars(math).items() if not name.startswith("_")
    }
    table.update({"abs": abs, "max": max, "min": min, "round": round})
    return table


PRIMITIVES: dict[str, LispValue] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    "=": num_eq,
    "append": append,
    "apply": apply_,
    "begin": begin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eq?": is_eq,
    "equal?": is_equal,
    "expt": expt,
    "length": length,
    "list": make_list,
    "list?": is_list,
    "map": map_,
    "not": logical_not,
    "null?": is_null,
    "number?": is_number,
    "print": print_,
    "procedure?": is_procedure,
    "symbol?": is_symbol,
    "pi": math.pi,
    "#t": True,
    "#f": False,
}


def register(env: Environment) -> Environment:
    """Install the math library and the primitive set into `env`."""
    env.update(math_table())
    env.update(PRIMITIVES)
    return env


def standard_env() -> Environment:
    """An environment with some Scheme standard procedures."""
    return register(Environment())
