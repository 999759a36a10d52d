"""Reducer for parsed values.

Only the top-level shapes below are rewritten:

    - strings, integers, booleans -> themselves
    - (quote x)                   -> x, unevaluated
    - (name arg ...)              -> primitive ``name`` applied to the reduced args

Anything else is returned as it is.
"""

from __future__ import annotations

from typing import Optional

from schemer import config
from schemer.evaluation.apply import apply
from schemer.types.values import Atom, Bool, Integer, List, LispVal, String


def evaluate(val: LispVal, strict: Optional[bool] = None) -> LispVal:
    if strict is None:
        strict = config.strict_apply()
    return _evaluate(val, strict)


def _evaluate(val: LispVal, strict: bool) -> LispVal:
    match val:
        case String() | Integer() | Bool():
            return val
        case List((Atom("quote"), quoted)):
            return quoted
        case List((Atom(name), *args)):
            return apply(name, [_evaluate(arg, strict) for arg in args], strict)
        case _:
            return val
