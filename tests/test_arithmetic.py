import pytest

from ducklisp.errors import ArgumentError, DivisionByZeroError


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ )", "0"),
        ("(* )", "1"),
        ("(+ 2 3)", "5"),
        ("(- 5)", "-5"),
        ("(/ 2)", "0.5"),
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 1 4)", "0.25"),
        ("(/ 120 2 3 4)", "5"),
        ("(/ 0 5)", "0"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(+ 1 2.5 3)", "6.5"),
        ("(* 1.5 2)", "3"),
        ("(+ -1 5 -3)", "1"),
        ("(- -10 -5)", "-5"),
        ("(+ 0.1 0.2)", "0.30000000000000004"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(= 1 1)", "t"),
        ("(= 1 1 1)", "t"),
        ("(= 1 1 2)", "nil"),
        ("(= 2 1 1)", "nil"),
        ("(< 1 2)", "t"),
        ("(< 1 2 3)", "t"),
        ("(< 1 3 2)", "nil"),
        ("(< 2 2)", "nil"),
        ("(> 3 2 1)", "t"),
        ("(> 3 1 2)", "nil"),
        ("(> 1 2)", "nil"),
    ]
)
def test_arithmetic_and_comparison(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 0)", "(/ 5 2 0)", "(/ 1 0.0)"])
def test_division_by_zero(run, source):
    with pytest.raises(DivisionByZeroError) as exc_info:
        run(source)
    assert isinstance(exc_info.value, ZeroDivisionError)


@pytest.mark.parametrize(
    "source",
    [
        "(-)",
        "(/)",
        '(+ 1 "2")',
        "(* 2 t)",
        "(- nil)",
        "(/ 4 (list 2))",
        "(=)",
        "(= 1)",
        "(< 1)",
        "(>)",
        '(< 1 "a")',
        "(= t t)",
        "(> 3 2 (list))",
    ]
)
def test_arithmetic_argument_errors(run, source):
    with pytest.raises(ArgumentError):
        run(source)
