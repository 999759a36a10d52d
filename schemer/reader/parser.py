"""
  Lisp Reader

Recursive-descent reader for a Scheme-like surface syntax. Produces one
value from the start of the input; anything after that expression is left
unread.

Alternatives are tried in this order, each from the same starting position:

    - strings            "..."          -> String
    - vectors            #( ... )       -> Vector
    - atoms / booleans   foo, #t, #f    -> Atom / Bool
    - characters         #\\a, #\\space   -> Char
    - complex numbers    1.5+2i         -> Complex
    - floats             3.14           -> Float
    - rationals          1/2            -> Rational
    - integers           42, #x2A       -> Integer
    - quote forms        'x `x ,x       -> (quote x) (quasiquote x) (unquote x)
    - lists              (a b), (a . b) -> List / DottedList

List elements are separated by whitespace, but the '.' of a dotted list
may follow the last element directly: (a. b) reads like (a . b).

The recursive productions (expressions, lists, vectors, quote forms) are
written as plain functions so that each nesting level costs only a few
stack frames. Input nested deeper than the interpreter's stack allows is
reported as a parse failure.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from schemer import config
from schemer.errors import SchemerParseError
from schemer.reader.combinators import (
    Parser, any_char, char, fail, join, many, many1, none_of, one_of, parser,
    satisfy, seq, string, succeed,
)
from schemer.reader.numbers import (
    RADIX_LITERAL, complex_number, digit, float_number, number, rational_number,
)
from schemer.reader.result import Failure, Result, Success, merge_errors
from schemer.types.values import (
    Atom, Bool, Char, DottedList, List, LispVal, String, Vector,
)

logger = logging.getLogger(__name__)

SYMBOL_CHARS = "!#$%&|*+-/:<=>?@^_~"

NAMED_CHARS: dict[str, str] = {
    "newline": "\n",
    "space": " ",
}

ESCAPES: dict[str, str] = {
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
}

letter = satisfy(str.isalpha, "letter")
symbol = one_of(SYMBOL_CHARS, "symbol")


def _expect(pos: int, *labels: str) -> Failure:
    return Failure(pos, frozenset(labels))


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


# ----------------------
# Strings
# ----------------------
def _resolve_escape(c: str) -> Parser:
    if c in ESCAPES:
        return succeed(ESCAPES[c])
    return fail(f"unknown escape sequence \\{c}", fatal=True)


escaped_char = (char("\\") >> any_char).bind(_resolve_escape)

parse_string = (
    char('"') >> many(escaped_char | none_of('"\\', "string character")) << char('"')
).map(lambda chars: String(join(chars)))


# ----------------------
# Atoms and booleans
# ----------------------
atom_token = seq(letter | symbol, many(letter | digit | symbol)).map(
    lambda parts: parts[0] + join(parts[1])
)


def _claimed_by_hash_literal(name: str, text: str, end: int) -> bool:
    """True when a '#'-led token belongs to the character, vector or radix grammar."""
    if name == "#" and text.startswith(("\\", "("), end):
        return True
    return RADIX_LITERAL.fullmatch(name) is not None


@parser
def parse_atom(text: str, pos: int) -> Result:
    token = atom_token(text, pos)
    if isinstance(token, Failure):
        return token
    name = token.value
    if name == "#t":
        return Success(Bool(True), token.pos, token.error)
    if name == "#f":
        return Success(Bool(False), token.pos, token.error)
    if _claimed_by_hash_literal(name, text, token.pos):
        return _expect(pos, "atom")
    return Success(Atom(name), token.pos, token.error)


# ----------------------
# Characters
# ----------------------
def _named_char(name: str) -> Parser:
    lowered = name.lower()
    if lowered in NAMED_CHARS:
        return succeed(Char(NAMED_CHARS[lowered]))
    if len(name) == 1:
        return succeed(Char(name))
    return fail(f"unknown character name {name!r}", fatal=True)


parse_char = (string("#\\") >> many1(letter).map(join)).bind(_named_char)


# ----------------------
# Element sequences
# ----------------------
Elements = Union[Failure, tuple[list[LispVal], int, Optional[Failure]]]


def _read_elements(text: str, pos: int, keep_trailing_space: bool) -> Elements:
    """Read whitespace-separated expressions starting at ``pos``.

    Returns the items, the position after them and the furthest failure
    seen, or a fatal Failure. With ``keep_trailing_space`` whitespace after
    the last item is consumed (sepEndBy); otherwise the position stays just
    past the last item (sepBy).
    """
    items: list[LispVal] = []
    error: Optional[Failure] = None
    resume = pos
    while True:
        item = parse_expr.fn(text, pos)
        if isinstance(item, Failure):
            if item.fatal:
                return item
            return items, (pos if keep_trailing_space else resume), merge_errors(error, item)
        items.append(item.value)
        error = merge_errors(error, item.error)
        resume = item.pos
        pos = _skip_spaces(text, item.pos)
        if pos == item.pos:
            return items, pos, merge_errors(error, _expect(pos, "space"))


# ----------------------
# Vectors
# ----------------------
@parser
def parse_vector(text: str, pos: int) -> Result:
    if not text.startswith("#(", pos):
        return _expect(pos, '"#("')
    elements = _read_elements(text, pos + 2, keep_trailing_space=False)
    if isinstance(elements, Failure):
        return elements
    items, end, error = elements
    if text.startswith(")", end):
        return Success(Vector(tuple(items)), end + 1, error)
    return merge_errors(error, _expect(end, '")"'))


# ----------------------
# Lists and dotted lists
# ----------------------
def _close_paren(text: str, pos: int, val: LispVal, error: Optional[Failure]) -> Result:
    close = _skip_spaces(text, pos)
    if text.startswith(")", close):
        return Success(val, close + 1, error)
    return merge_errors(error, _expect(close, "space", '")"'))


def _dotted_tail(text: str, pos: int) -> Result:
    if not text.startswith(".", pos):
        return _expect(pos, '"."')
    after_dot = _skip_spaces(text, pos + 1)
    if after_dot == pos + 1:
        return _expect(after_dot, "space")
    tail = parse_expr.fn(text, after_dot)
    if isinstance(tail, Failure):
        return tail
    return _close_paren(text, tail.pos, tail.value, tail.error)


@parser
def parse_list(text: str, pos: int) -> Result:
    if not text.startswith("(", pos):
        return _expect(pos, '"("')
    elements = _read_elements(text, _skip_spaces(text, pos + 1), keep_trailing_space=True)
    if isinstance(elements, Failure):
        return elements
    items, end, error = elements
    head = tuple(items)

    tail = _dotted_tail(text, end)
    if isinstance(tail, Success):
        return Success(DottedList(head, tail.value), tail.pos, merge_errors(error, tail.error))
    if tail.fatal:
        return tail
    return _close_paren(text, end, List(head), merge_errors(error, tail))


# ----------------------
# Quote forms
# ----------------------
def _quote_form(prefix: str, name: str) -> Parser:
    @parser
    def parse_quote(text: str, pos: int) -> Result:
        if not text.startswith(prefix, pos):
            return _expect(pos, f'"{prefix}"')
        quoted = parse_expr.fn(text, pos + 1)
        if isinstance(quoted, Failure):
            return quoted
        return Success(List((Atom(name), quoted.value)), quoted.pos, quoted.error)
    return parse_quote


parse_quoted = _quote_form("'", "quote")
parse_quasi_quoted = _quote_form("`", "quasiquote")
parse_unquote = _quote_form(",", "unquote")


# ----------------------
# Expressions
# ----------------------
@parser
def parse_expr(text: str, pos: int) -> Result:
    """Ordered alternation over ALTERNATIVES, labelling those that fail at ``pos``."""
    error: Optional[Failure] = None
    try:
        for name, alternative in ALTERNATIVES:
            result = alternative.fn(text, pos)
            if isinstance(result, Success):
                return result.with_error(merge_errors(error, result.error))
            if result.fatal:
                return result
            if result.pos == pos:
                result = result.expecting(name)
            error = merge_errors(error, result)
    except RecursionError:
        return Failure(pos, message="expression nested too deeply", fatal=True)
    return error


ALTERNATIVES: tuple[tuple[str, Parser], ...] = (
    ("string", parse_string),
    ("vector", parse_vector),
    ("atom", parse_atom),
    ("character", parse_char),
    ("number", complex_number),
    ("number", float_number),
    ("number", rational_number),
    ("number", number),
    ("quoted expression", parse_quoted),
    ("quoted expression", parse_quasi_quoted),
    ("quoted expression", parse_unquote),
    ("list", parse_list),
)


# ----------------------
# Entry points
# ----------------------
def parse_prefix(source: str, source_name: Optional[str] = None) -> tuple[LispVal, int]:
    """Read one expression from the start of ``source``.

    Returns the value and the offset just past it. Raises
    SchemerParseError when no expression can be read.
    """
    result = parse_expr(source, 0)
    if isinstance(result, Failure):
        error = to_parse_error(result, source, source_name)
        logger.debug("read failed: %s", error)
        raise error
    logger.debug("read %s (%d of %d chars)", result.value, result.pos, len(source))
    return result.value, result.pos


def parse(source: str, source_name: Optional[str] = None) -> LispVal:
    value, _ = parse_prefix(source, source_name)
    return value


def to_parse_error(failure: Failure, source: str, source_name: Optional[str] = None) -> SchemerParseError:
    pos = failure.pos
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    unexpected = "end of input" if pos >= len(source) else f'"{source[pos]}"'
    return SchemerParseError(
        source_name or config.get_source_name(),
        pos,
        line,
        column,
        unexpected,
        tuple(sorted(failure.expected)),
        failure.message,
    )
