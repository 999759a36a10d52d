"""Text rendering of Lisp values.

The output is for display and is not guaranteed to read back the same:
strings are not re-escaped, vectors print like lists, and a dotted list
prints its '.' with no space before it.
"""

from __future__ import annotations

import math
from typing import Iterable

from schemer.types.values import (
    Atom, Bool, Char, Complex, DottedList, Float, Integer, List, LispVal,
    Rational, String, Vector,
)

CHAR_NAMES: dict[str, str] = {
    "\n": "newline",
    " ": "space",
}

# str(int) refuses very long numbers, so large ones are printed in chunks.
_CHUNK_DIGITS = 18
_CHUNK = 10 ** _CHUNK_DIGITS


def show_val(val: LispVal) -> str:
    match val:
        case String(contents):
            return f'"{contents}"'
        case Atom(name):
            return name
        case Integer(n):
            return show_integer(n)
        case Float(f):
            return repr(f)
        case Complex(c):
            return _show_complex(c)
        case Rational(r):
            return f"{show_integer(r.numerator)}/{show_integer(r.denominator)}"
        case Bool(True):
            return "#t"
        case Bool(False):
            return "#f"
        case Char(c):
            return "#\\" + CHAR_NAMES.get(c, c)
        case List(items) | Vector(items):
            return "(" + unwords_list(items) + ")"
        case DottedList(head, tail):
            return "(" + unwords_list(head) + "." + show_val(tail) + ")"
    raise TypeError(f"Cannot render {val!r}")


def unwords_list(values: Iterable[LispVal]) -> str:
    return " ".join(show_val(v) for v in values)


def show_integer(n: int) -> str:
    if n < 0:
        return "-" + show_integer(-n)
    chunks = []
    while n >= _CHUNK:
        n, low = divmod(n, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(n))
    return "".join(reversed(chunks))


def _show_complex(c: complex) -> str:
    sign = "-" if math.copysign(1.0, c.imag) < 0 else "+"
    return f"{c.real!r}{sign}{abs(c.imag)!r}i"
