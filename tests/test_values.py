import dataclasses
from fractions import Fraction

import pytest

from schemer import (
    Atom, Bool, Char, Complex, DottedList, Float, Integer, List, Rational, String, Vector,
)


def test_structural_equality():
    a = List((Atom("f"), Integer(1), Vector((String("x"),))))
    b = List((Atom("f"), Integer(1), Vector((String("x"),))))
    assert a == b
    assert hash(a) == hash(b)


@pytest.mark.parametrize(
    "left,right",
    [
        (Integer(1), Float(1.0)),
        (Bool(True), Integer(1)),
        (Atom("#t"), Bool(True)),
        (List((Atom("a"), Atom("b"))), DottedList((Atom("a"),), Atom("b"))),
        (List((Integer(1),)), Vector((Integer(1),))),
        (String("a"), Char("a")),
        (Rational(Fraction(2, 1)), Integer(2)),
    ]
)
def test_distinct_cases_never_equal(left, right):
    assert left != right


def test_values_are_immutable():
    vec = Vector((Integer(1), Integer(2)))
    with pytest.raises(dataclasses.FrozenInstanceError):
        vec.items = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        Atom("x").name = "y"


def test_vector_is_zero_indexed_and_fixed_length():
    vec = Vector((Atom("a"), Atom("b")))
    assert len(vec) == 2
    assert vec[0] == Atom("a")
    assert vec[1] == Atom("b")
    with pytest.raises(IndexError):
        vec[2]


def test_rational_is_reduced():
    assert Rational(Fraction(2, 4)) == Rational(Fraction(1, 2))


def test_str_renders_value():
    assert str(Integer(42)) == "42"
    assert str(List((Atom("a"), Complex(complex(1, 2))))) == "(a 1.0+2.0i)"
