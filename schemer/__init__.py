# Schemer: a reader for Scheme-like S-expressions.
#
# Values are the frozen dataclasses in schemer.types.values; LispVal is their
# union. The reader (schemer.reader.parser) is the only thing that builds
# them, bottom-up, so a tree never shares or cycles.

import logging

from schemer.types.values import (
    Atom, Bool, Char, Complex, DottedList, Float, Integer, List, LispVal,
    Rational, String, Vector,
)

from schemer.reader.parser import parse, parse_prefix
from schemer.interpreter import read_expr

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Atom", "Bool", "Char", "Complex", "DottedList", "Float", "Integer", "List",
    "LispVal", "Rational", "String", "Vector", "parse", "parse_prefix", "read_expr",
]
