import math

import pytest

from lispy.builtin.env_builtin import PRIMITIVES, is_eq, is_equal, math_table
from lispy.errors import LispyApplicationError
from lispy.types.symbol import Symbol


@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+ 1 2)", 3),
        ("(- 10 4)", 6),
        ("(* 2 3)", 6),
        ("(/ 7 2)", 3.5),
        ("(> 3 2)", True),
        ("(< 3 2)", False),
        ("(>= 2 2)", True),
        ("(<= 3 2)", False),
        ("(= 1 1.0)", True),
        ("(expt 2 10)", 1024),
        ("(append (quote (1 2)) (quote (3)))", [1, 2, 3]),
        ("(apply + (quote (1 2)))", 3),
        ("(begin 1 2 3)", 3),
        ("(car (quote (1 2 3)))", 1),
        ("(cdr (quote (1 2 3)))", [2, 3]),
        ("(cdr (quote (1)))", []),
        ("(cons 0 (quote (1 2)))", [0, 1, 2]),
        ("(length (list 1 2 3))", 3),
        ("(list 1 (list 2 3))", [1, [2, 3]]),
        ("(list)", []),
        ("(list? (list))", True),
        ("(list? 1)", False),
        ("(map (lambda (x) (* x x)) (list 1 2 3))", [1, 4, 9]),
        ("(not #f)", True),
        ("(not 0)", False),
        ("(null? (list))", True),
        ("(null? (list 1))", False),
        ("(null? 0)", False),
        ("(number? 1.5)", True),
        ("(number? #t)", False),
        ("(number? (quote a))", False),
        ("(procedure? car)", True),
        ("(procedure? (lambda (x) x))", True),
        ("(procedure? 1)", False),
        ("(symbol? (quote a))", True),
        ("(symbol? 1)", False),
        ("(eq? (quote a) (quote a))", True),
        ("(eq? 2 2.0)", True),
        ("(eq? (list 1) (list 1))", False),
        ("(equal? (list 1 (list 2)) (list 1 (list 2)))", True),
        ("(equal? (list 1 2) (list 1 3))", False),
        ("(equal? 1 1.0)", True),
        ("(sqrt 16)", 4.0),
        ("(max 1 7)", 7),
        ("(abs -3)", 3),
    ]
)
def test_primitives(interp, source, expected):
    assert interp.eval(source) == expected


def test_eq_identity_of_same_list(interp):
    interp.eval("(define l (list 1))")
    assert interp.eval("(eq? l l)") is True


def test_map_preserves_order_and_apply_spreads(interp):
    interp.eval("(define seen (list))")
    interp.eval("(define note (lambda (x) (begin (set! seen (cons x seen)) x)))")
    assert interp.eval("(map note (list 1 2 3))") == [1, 2, 3]
    assert interp.eval("seen") == [3, 2, 1]
    assert interp.eval("(apply (lambda (a b) (- a b)) (list 10 3))") == 7


def test_begin_without_arguments(interp):
    assert interp.eval("(begin)") is None


def test_print_outputs_rendered_value(interp, capsys):
    assert interp.eval("(print (list 1 (quote a) (list 2.5)))") is None
    assert capsys.readouterr().out == "(1 a (2.5))\n"


def test_math_library_installed(interp):
    assert interp.eval("pi") == math.pi
    assert interp.eval("e") == math.e
    assert interp.eval("(floor 2.5)") == 2
    table = math_table()
    assert not any(name.startswith("_") for name in table)
    assert table["sqrt"] is math.sqrt


def test_primitive_names_preserved():
    expected = {
        "+", "-", "*", "/", ">", "<", ">=", "<=", "=", "append", "apply", "begin",
        "car", "cdr", "cons", "eq?", "equal?", "expt", "length", "list", "list?",
        "map", "not", "null?", "number?", "print", "procedure?", "symbol?", "pi",
    }
    assert expected <= set(PRIMITIVES)


@pytest.mark.parametrize(
    "source",
    [
        "(+ 1)",
        "(+ 1 2 3)",
        "(car (list))",
        "(car 1)",
        "(cons 1 2)",
        "(append (list 1) 2)",
        "(map 5 (list 1))",
        "(apply car 1)",
        "(length 3)",
        "(+ 1 (quote a))",
    ]
)
def test_primitive_failures(interp, source):
    with pytest.raises(LispyApplicationError):
        interp.eval(source)


def test_equality_helpers():
    assert is_eq(Symbol("a"), Symbol("a"))
    assert not is_eq([1], [1])
    assert is_equal([1, [Symbol("x")]], [1, [Symbol("x")]])
    assert not is_equal([1], 1)


def test_non_finite_names_are_symbols(interp):
    assert interp.eval("inf") == math.inf
    assert math.isnan(interp.eval("nan"))
    interp.eval("(define infinity 3)")
    assert interp.eval("(+ infinity 1)") == 4
