import pytest

from schemer import Atom, Bool, DottedList, Float, Integer, List, String, Vector
from schemer.errors import (
    SchemerArityError, SchemerDivisionByZero, SchemerTypeError, SchemerUnboundSymbol,
)
from schemer.evaluation.apply import apply
from schemer.evaluation.evaluator import evaluate
from schemer.evaluation.primitives import PRIMITIVES
from schemer.reader.parser import parse


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", Integer(3)),
        ("(+ 1 2 3)", Integer(6)),
        ("(- 10 3 2)", Integer(5)),
        ("(- 5)", Integer(5)),
        ("(* 2 3 4)", Integer(24)),
        ("(/ 12 3)", Integer(4)),
        ("(/ 7 2)", Integer(3)),
        ("(/ (- 0 7) 2)", Integer(-4)),
        ("(mod 7 2)", Integer(1)),
        ("(mod (- 0 7) 2)", Integer(1)),
        ("(quotient (- 0 7) 2)", Integer(-3)),
        ("(quotient 7 (- 0 2))", Integer(-3)),
        ("(remainder (- 0 7) 2)", Integer(-1)),
        ("(remainder 7 (- 0 2))", Integer(1)),
        ("(+ 1 (* 2 3))", Integer(7)),
        ("(+ (* 2 3) (- 10 4))", Integer(12)),
        ("(* 99999999999 99999999999)", Integer(99999999999 * 99999999999)),
        ("(+ #b1010 #xA)", Integer(20)),
    ]
)
def test_arithmetic(source, expected):
    assert evaluate(parse(source)) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote (1 2))", List((Integer(1), Integer(2)))),
        ("'(1 2)", List((Integer(1), Integer(2)))),
        ("'(+ 1 2)", List((Atom("+"), Integer(1), Integer(2)))),
        ("'x", Atom("x")),
        ("(+ 1 '2)", Integer(3)),
    ]
)
def test_quote_is_not_evaluated(source, expected):
    assert evaluate(parse(source)) == expected


@pytest.mark.parametrize(
    "val",
    [
        String("s"),
        Integer(3),
        Bool(False),
        Atom("x"),
        Float(1.5),
        List(()),
        Vector((List((Atom("+"), Integer(1))),)),
        DottedList((Atom("+"),), Integer(1)),
        List((Integer(1), Integer(2))),
        List((List((Atom("+"), Integer(1))), Integer(2))),
    ]
)
def test_other_values_pass_through(val):
    assert evaluate(val) is val


def test_unknown_operator_gives_false():
    assert evaluate(parse("(bogus 1)")) == Bool(False)
    assert evaluate(parse("(quote)")) == Bool(False)


def test_unknown_operator_strict():
    with pytest.raises(SchemerUnboundSymbol):
        evaluate(parse("(bogus 1)"), strict=True)


def test_unknown_operator_strict_from_env(monkeypatch):
    monkeypatch.setenv("SCHEMER_STRICT_APPLY", "1")
    with pytest.raises(SchemerUnboundSymbol):
        evaluate(parse("(bogus 1)"))
    assert evaluate(parse("(bogus 1)"), strict=False) == Bool(False)


@pytest.mark.parametrize(
    "source, error",
    [
        ('(+ 1 "a")', SchemerTypeError),
        ("(+ 1 2.5)", SchemerTypeError),
        ("(+ 1 (bogus))", SchemerTypeError),
        ("(* 'a 2)", SchemerTypeError),
        ("(+)", SchemerArityError),
        ("(/ 1 0)", SchemerDivisionByZero),
        ("(mod 1 0)", SchemerDivisionByZero),
        ("(quotient 1 0)", SchemerDivisionByZero),
        ("(remainder 1 0)", SchemerDivisionByZero),
    ]
)
def test_bad_arguments_fail_loudly(source, error):
    with pytest.raises(error):
        evaluate(parse(source))


def test_apply_looks_up_primitive_table():
    assert set(PRIMITIVES) == {"+", "-", "*", "/", "mod", "quotient", "remainder"}
    assert apply("+", [Integer(2), Integer(40)]) == Integer(42)
    assert apply("nope", [Integer(1)]) == Bool(False)


def test_division_by_zero_hides_host_exception():
    with pytest.raises(SchemerDivisionByZero) as excinfo:
        evaluate(parse("(quotient 7 0)"))
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__
