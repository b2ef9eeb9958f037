import pytest

from lispy.errors import LispyArityError, LispyInvalidSymbol, LispyUnboundSymbol
from lispy.evaluation.evaluator import evaluate
from lispy.evaluation.special_forms import SPECIAL_FORMS, is_keyword
from lispy.reader.parser import parse
from lispy.types.symbol import Symbol


def run(source, env):
    return evaluate(parse(source), env)


# ------------------ quote ------------------

def test_quote_returns_form_unevaluated(env):
    assert run("(quote (undefined-fn (nested x) 1))", env) == [
        Symbol("undefined-fn"), [Symbol("nested"), Symbol("x")], 1
    ]
    assert run("(quote sym)", env) == Symbol("sym")


def test_quote_arity(env):
    with pytest.raises(LispyArityError):
        run("(quote a b)", env)


# ------------------ if ------------------

def test_if_chooses_branch(env):
    assert run("(if (> 3 2) 1 2)", env) == 1
    assert run("(if (> 2 3) 1 2)", env) == 2


def test_if_untaken_branch_has_no_effects(env):
    assert run("(if (> 3 2) 1 (define zz 5))", env) == 1
    assert Symbol("zz") not in env
    assert run("(if (> 2 3) (define yy 5) 2)", env) == 2
    assert Symbol("yy") not in env


@pytest.mark.parametrize(
    "test_expr, expected",
    [
        ("#f", 2),
        ("#t", 1),
        ("0", 1),
        ("(quote ())", 1),
        ("(quote nil)", 1),
    ]
)
def test_only_false_is_false(env, test_expr, expected):
    assert run(f"(if {test_expr} 1 2)", env) == expected


def test_if_without_alternative(env):
    assert run("(if #f 1)", env) is None
    assert run("(if #t 1)", env) == 1


def test_if_arity(env):
    with pytest.raises(LispyArityError):
        run("(if #t)", env)


# ------------------ define / set! ------------------

def test_define_binds_in_current_frame(env):
    run("(define x 1)", env)
    assert run("((lambda (x) (begin (define x 5) x)) 3)", env) == 5
    assert run("x", env) == 1


def test_define_inside_procedure_does_not_leak(env):
    run("(define f (lambda () (define local 7)))", env)
    run("(f)", env)
    assert Symbol("local") not in env


def test_set_mutates_outer_binding(env):
    run("(define x 1)", env)
    assert run("((lambda () (set! x 2)))", env) is None
    assert run("x", env) == 2


def test_set_unbound_fails(env):
    with pytest.raises(LispyUnboundSymbol):
        run("(set! nowhere 1)", env)
    assert Symbol("nowhere") not in env


def test_set_evaluates_value_before_lookup(env):
    with pytest.raises(LispyUnboundSymbol, match="also-missing"):
        run("(set! missing also-missing)", env)


@pytest.mark.parametrize("source", ["(define if 1)", "(set! lambda 1)", "(define quote 2)"])
def test_keywords_cannot_be_rebound(env, source):
    with pytest.raises(LispyInvalidSymbol):
        run(source, env)


def test_keywords_are_dispatched_before_bindings(env):
    env.define(Symbol("quote"), lambda x: "shadowed")
    assert run("(quote a)", env) == Symbol("a")


def test_registry_is_closed():
    assert set(map(str, SPECIAL_FORMS)) == {"quote", "if", "define", "set!", "lambda"}
    assert is_keyword(Symbol("set!"))
    assert not is_keyword(Symbol("begin"))
    with pytest.raises(TypeError):
        SPECIAL_FORMS[Symbol("let")] = None


# ------------------ lambda ------------------

@pytest.mark.parametrize(
    "source, error",
    [
        ("(lambda (x))", LispyArityError),
        ("(lambda (x) x x)", LispyArityError),
        ("(lambda x x)", LispyInvalidSymbol),
        ("(lambda (1) 1)", LispyInvalidSymbol),
        ("(set! 1 2)", LispyInvalidSymbol),
    ]
)
def test_malformed_forms(env, source, error):
    with pytest.raises(error):
        run(source, env)
