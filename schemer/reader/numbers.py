"""
Numeric sub-grammars.

All of these except radix integers start with a decimal digit, so the
reader tries them in a fixed order (complex, float, rational, integer) and
falls back to the next one when a branch fails.
"""

from __future__ import annotations

import math
import re
from fractions import Fraction
from typing import Iterable

from schemer.reader.combinators import (
    Parser, attempt, char, choice, fail, join, many, many1, one_of, seq, succeed,
)
from schemer.types.values import Complex, Float, Integer, LispVal, Rational

DIGITS = "0123456789"
BINARY_DIGITS = "01"
OCTAL_DIGITS = "01234567"
HEX_DIGITS = "0123456789abcdefABCDEF"

# A whole token that the radix grammar owns; the atom grammar leaves these alone.
RADIX_LITERAL = re.compile(r"#(?:d[0-9]+|b[01]*|o[0-7]*|x[0-9a-fA-F]*)")

digit = one_of(DIGITS, "digit")
digits = many1(digit).map(join)


def to_decimal(base: int, digit_chars: Iterable[str]) -> int:
    """Accumulate digits most-significant first. No digits at all reads as 0.

    Unlike int(str), this has no limit on the number of digits.
    """
    value = 0
    for d in digit_chars:
        value = value * base + int(d, 16)
    return value


plain_number = digits.map(lambda ds: Integer(to_decimal(10, ds)))


def _fraction_part(whole: str) -> Parser:
    return digits.map(lambda frac: Float(float(f"{whole}.{frac}"))) | fail(
        "float literal needs digits after the decimal point", fatal=True
    )


# Once digits and a '.' have been read, the fraction digits are mandatory.
float_number = (digits << char(".")).bind(_fraction_part)


def _make_rational(parts: tuple[str, str, str]) -> Parser:
    numerator, _, denominator = parts
    if not numerator:
        return fail("rational literal has an empty numerator", fatal=True)
    if not denominator:
        return fail("rational literal has an empty denominator", fatal=True)
    denom = to_decimal(10, denominator)
    if denom == 0:
        return fail("rational literal has a zero denominator", fatal=True)
    return succeed(Rational(Fraction(to_decimal(10, numerator), denom)))


rational_number = seq(many(digit).map(join), char("/"), many(digit).map(join)).bind(_make_rational)


def _as_float(val: LispVal) -> float:
    match val:
        case Float(value):
            return value
        case Integer(value):
            try:
                return float(value)
            except OverflowError:
                return math.inf
    raise TypeError(f"not a real number: {val!r}")


real_part = (float_number | plain_number).map(_as_float)

# Any failure inside, fatal or not, lets the float alternative run next.
complex_number = attempt(
    seq(real_part, char("+"), real_part, char("i")).map(
        lambda parts: Complex(complex(parts[0], parts[2]))
    )
)


def read_number_in_base(base: int, alphabet: str, label: str) -> Parser:
    return many(one_of(alphabet, label)).map(lambda ds: Integer(to_decimal(base, ds)))


radix_number = char("#") >> choice(
    char("d") >> plain_number,
    char("b") >> read_number_in_base(2, BINARY_DIGITS, "binary digit"),
    char("o") >> read_number_in_base(8, OCTAL_DIGITS, "octal digit"),
    char("x") >> read_number_in_base(16, HEX_DIGITS, "hexadecimal digit"),
)

number = plain_number | radix_number
