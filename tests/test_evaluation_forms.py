import pytest

from ducklisp.errors import ArgumentError, UnboundSymbolError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", "t"),
        ("(and 1 2)", "2"),
        ("(and 1 nil 2)", "nil"),
        ("(and 0 \"\" (list))", "()"),
        ("(or)", "nil"),
        ("(or nil 3)", "3"),
        ("(or nil nil)", "nil"),
        ("(or 0 nil)", "0"),
        ("(if nil 1 2)", "2"),
        ("(if 0 1 2)", "1"),
        ("(if (list) 1 2)", "1"),
        ('(if "" 1 2)', "1"),
        ("(if nil 1)", "nil"),
        ("(if t 1)", "1"),
        ("(cond)", "nil"),
        ("(cond (nil 1) (t 2))", "2"),
        ("(cond (nil 1) (5))", "5"),
        ("(cond ((< 2 1) 1) ((> 2 1) 10 20))", "20"),
        ("(cond (nil 1))", "nil"),
    ]
)
def test_conditional_forms(run, source, expected):
    assert run(source) == expected


def test_and_short_circuits(run):
    # the unbound symbol after nil is never evaluated
    assert run("(and nil undefined-symbol)") == "nil"


def test_or_short_circuits(run):
    assert run("(or 1 undefined-symbol)") == "1"


def test_if_only_evaluates_taken_branch(run):
    assert run("(if t 1 undefined-symbol)") == "1"
    assert run("(if nil undefined-symbol 2)") == "2"


def test_cond_stops_at_first_match(run):
    assert run("(defvar n 0)", "(cond (t (setq n 1)) (t (setq n 2)))") == "1"
    assert run("n") == "1"


@pytest.mark.parametrize(
    "source",
    [
        "(if)",
        "(if t)",
        "(if t 1 2 3)",
        "(cond 1)",
        "(cond ())",
        "(defvar x)",
        "(defvar x 1 2)",
        "(defvar 1 2)",
        '(defvar "x" 2)',
        "(setq x)",
        "(setq 1 2)",
        "(defun f (x))",
        "(defun f)",
        "(defun 1 (x) x)",
        "(defun f x x)",
        "(lambda (x))",
        "(lambda x x)",
        "(lambda)",
    ]
)
def test_special_form_argument_errors(run, source):
    with pytest.raises(ArgumentError):
        run(source)


def test_defvar_returns_value_and_binds(run):
    assert run("(defvar x (+ 1 2))") == "3"
    assert run("x") == "3"


def test_defvar_inside_function_binds_locally(run):
    run("(defun f () (defvar local 5) local)")
    assert run("(f)") == "5"
    with pytest.raises(UnboundSymbolError):
        run("local")


def test_setq_requires_existing_binding(run):
    with pytest.raises(UnboundSymbolError):
        run("(setq y 1)")
    with pytest.raises(UnboundSymbolError):
        run("y")


def test_setq_from_function_updates_global(run):
    run("(defvar c 0)", "(defun inc () (setq c (+ c 1)))", "(inc)", "(inc)")
    assert run("c") == "2"


def test_defun_returns_name_and_binds_function(run):
    assert run("(defun sq (x) (* x x))") == "sq"
    assert run("(sq 4)") == "16"


def test_defun_multiple_body_forms(run):
    run("(defvar log 0)", "(defun f (x) (setq log x) (+ x 1))")
    assert run("(f 41)") == "42"
    assert run("log") == "41"


def test_recursive_function(run):
    run("(defun fact (n) (if (< n 2) 1 (* n (fact (- n 1)))))")
    assert run("(fact 10)") == "3628800"


def test_mutual_recursion(run):
    run(
        "(defun is-even (n) (if (= n 0) t (is-odd (- n 1))))",
        "(defun is-odd (n) (if (= n 0) nil (is-even (- n 1))))",
    )
    assert run("(is-even 10)") == "t"
    assert run("(is-odd 7)") == "t"


def test_lambda_returns_closure(run):
    assert run("((lambda (x y) (+ x y)) 2 3)") == "5"


def test_closure_outlives_creating_call(run):
    run("(defun make-adder (n) (lambda (x) (+ x n)))", "(defvar add5 (make-adder 5))")
    assert run("(add5 10)") == "15"
    assert run("((make-adder 2) 3)") == "5"


def test_closures_share_their_defining_frame(run):
    run(
        "(defun make-counter () (defvar count 0) (list (lambda () (setq count (+ count 1))) (lambda () count)))",
        "(defvar c (make-counter))",
        "(defvar bump (car c))",
        "(defvar peek (car (cdr c)))",
        "(bump)",
        "(bump)",
    )
    assert run("(peek)") == "2"


def test_closure_sees_later_mutation(run):
    assert run("(defvar x 1)", "(defun f () x)", "(defvar x 2)", "(f)") == "2"
    assert run("(setq x 3)", "(f)") == "3"


def test_parameters_shadow_globals(run):
    run("(defvar x 100)", "(defun f (x) (* x 2))")
    assert run("(f 4)") == "8"
    assert run("x") == "100"


def test_special_form_names_can_be_shadowed(run):
    run("(defun twice (if) (* if 2))")
    assert run("(twice 4)") == "8"
