import pytest

from schemer import read_expr
from schemer.errors import SchemerTypeError, SchemerUnboundSymbol


@pytest.mark.parametrize(
    "source, text",
    [
        ("(+ 1 2)", "3"),
        ("(- (+ 10 5) (* 2 3))", "9"),
        ("'(1 2)", "(1 2)"),
        ("(bogus 1)", "#f"),
        ('"hi"', '"hi"'),
        ("#t", "#t"),
        ("#\\a", "#\\a"),
        ("3.14", "3.14"),
        ("1/2", "1/2"),
        ("1+2i", "1.0+2.0i"),
        ("#(1 2)", "(1 2)"),
        ("(1 2 . 3)", "(1 2.3)"),
        ("foo", "foo"),
        ("(+ 1 2) trailing", "3"),
    ]
)
def test_read_expr_evaluates(source, text):
    assert read_expr(source) == text


@pytest.mark.parametrize(
    "source, text",
    [
        ("(+ 1 2)", "(+ 1 2)"),
        ("'(1 2)", "(quote (1 2))"),
        ("`(a ,b)", "(quasiquote (a (unquote b)))"),
        ("(bogus 1)", "(bogus 1)"),
    ]
)
def test_read_expr_without_evaluation(source, text):
    assert read_expr(source, evaluate=False) == text


def test_evaluation_switched_off_from_env(monkeypatch):
    monkeypatch.setenv("SCHEMER_EVALUATE", "0")
    assert read_expr("(+ 1 2)") == "(+ 1 2)"
    assert read_expr("(+ 1 2)", evaluate=True) == "3"


@pytest.mark.parametrize("source", ["(1 2", "", ")", "1/0", '"open'])
def test_read_expr_reports_no_match(source):
    text = read_expr(source)
    assert text.startswith("No match: ")
    assert '"lisp" (line 1, column' in text


def test_read_expr_propagates_reducer_errors():
    with pytest.raises(SchemerTypeError):
        read_expr('(+ 1 "a")')
    with pytest.raises(SchemerUnboundSymbol):
        read_expr("(bogus 1)", strict=True)
