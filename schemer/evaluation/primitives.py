from __future__ import annotations
from functools import reduce
from typing import Callable

from schemer.errors import SchemerArityError, SchemerDivisionByZero, SchemerTypeError
from schemer.types.values import Integer, LispVal

IntegerOp = Callable[[int, int], int]
Primitive = Callable[[list[LispVal]], LispVal]


# -------------------------------
# Integer division
# -------------------------------
def _quot(a: int, b: int) -> int:
    # Truncates toward zero, unlike //
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q

def _rem(a: int, b: int) -> int:
    # Takes the sign of the dividend, unlike %
    return a - b * _quot(a, b)

def _div(a: int, b: int) -> int:
    return a // b

def _mod(a: int, b: int) -> int:
    return a % b


# -------------------------------
# Folding
# -------------------------------
def unpack_integer(name: str, val: LispVal) -> int:
    if not isinstance(val, Integer):
        raise SchemerTypeError(f"All arguments to {name} must be integers, got {val}")
    return val.value

def numeric_binop(name: str, op: IntegerOp) -> Primitive:
    """Left-fold ``op`` over the Integer payloads of the arguments."""
    def fold(args: list[LispVal]) -> LispVal:
        if not args:
            raise SchemerArityError(f"{name} requires at least 1 argument")
        numbers = [unpack_integer(name, arg) for arg in args]
        try:
            return Integer(reduce(op, numbers))
        except ZeroDivisionError:
            raise SchemerDivisionByZero(f"{name}: division by zero") from None
    return fold


PRIMITIVES: dict[str, Primitive] = {
    "+": numeric_binop("+", lambda a, b: a + b),
    "-": numeric_binop("-", lambda a, b: a - b),
    "*": numeric_binop("*", lambda a, b: a * b),
    "/": numeric_binop("/", _div),
    "mod": numeric_binop("mod", _mod),
    "quotient": numeric_binop("quotient", _quot),
    "remainder": numeric_binop("remainder", _rem),
}
