"""
The Lisp value data model.

A closed set of immutable cases, one frozen dataclass each. Composite cases
hold tuples, so a List or Vector has a fixed length once built and owns its
children outright. Numbers use the host types:

    - Integer  -> int (arbitrary precision, radix literals normalise here)
    - Float    -> float
    - Complex  -> complex
    - Rational -> fractions.Fraction
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union


class _Value:
    __slots__ = ()

    def __str__(self) -> str:
        from schemer.printer import show_val
        return show_val(self)


@dataclass(frozen=True, slots=True)
class Atom(_Value):
    name: str


@dataclass(frozen=True, slots=True)
class List(_Value):
    items: tuple[LispVal, ...] = ()


@dataclass(frozen=True, slots=True)
class DottedList(_Value):
    head: tuple[LispVal, ...]
    tail: LispVal


@dataclass(frozen=True, slots=True)
class Vector(_Value):
    items: tuple[LispVal, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> LispVal:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class Integer(_Value):
    value: int


@dataclass(frozen=True, slots=True)
class Float(_Value):
    value: float


@dataclass(frozen=True, slots=True)
class Complex(_Value):
    value: complex


@dataclass(frozen=True, slots=True)
class Rational(_Value):
    value: Fraction


@dataclass(frozen=True, slots=True)
class String(_Value):
    value: str


@dataclass(frozen=True, slots=True)
class Bool(_Value):
    value: bool


@dataclass(frozen=True, slots=True)
class Char(_Value):
    value: str


LispVal = Union[
    Atom, List, DottedList, Vector, Integer, Float, Complex, Rational, String, Bool, Char
]
