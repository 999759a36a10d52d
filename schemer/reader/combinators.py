"""
Parser combinators for the reader.

A :class:`Parser` wraps a pure function ``(text, pos) -> Success | Failure``.
Alternation is ordered and always backtracks: when an alternative fails the
next one starts again from the same position, whatever the failed one had
read. The only exception is a *fatal* failure, which ends the alternation
at once.

Operators:
    p | q    ordered choice
    p >> q   run both, keep the right value
    p << q   run both, keep the left value
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from schemer.reader.result import Failure, Result, Success, merge_errors

ParseFn = Callable[[str, int], Result]


class Parser:
    __slots__ = ("fn",)

    def __init__(self, fn: ParseFn):
        self.fn = fn

    def __call__(self, text: str, pos: int = 0) -> Result:
        return self.fn(text, pos)

    def __or__(self, other: Parser) -> Parser:
        return choice(self, other)

    def __rshift__(self, other: Parser) -> Parser:
        return seq(self, other).map(lambda pair: pair[1])

    def __lshift__(self, other: Parser) -> Parser:
        return seq(self, other).map(lambda pair: pair[0])

    def map(self, f: Callable[[Any], Any]) -> Parser:
        def parse(text: str, pos: int) -> Result:
            result = self(text, pos)
            if isinstance(result, Failure):
                return result
            return Success(f(result.value), result.pos, result.error)
        return Parser(parse)

    def result(self, value: Any) -> Parser:
        return self.map(lambda _: value)

    def bind(self, f: Callable[[Any], Parser]) -> Parser:
        """Feed the parsed value to ``f`` and continue with the parser it returns."""
        def parse(text: str, pos: int) -> Result:
            first = self(text, pos)
            if isinstance(first, Failure):
                return first
            second = f(first.value)(text, first.pos)
            if isinstance(second, Failure):
                return merge_errors(first.error, second)
            return second.with_error(merge_errors(first.error, second.error))
        return Parser(parse)


def parser(fn: ParseFn) -> Parser:
    """Decorator: turn a raw ``(text, pos)`` function into a Parser."""
    return Parser(fn)


# -------------------------------
# Primitives
# -------------------------------
def succeed(value: Any) -> Parser:
    return Parser(lambda text, pos: Success(value, pos))


def fail(message: str, fatal: bool = False) -> Parser:
    return Parser(lambda text, pos: Failure(pos, frozenset(), message, fatal))


def satisfy(predicate: Callable[[str], bool], label: str) -> Parser:
    def parse(text: str, pos: int) -> Result:
        if pos < len(text) and predicate(text[pos]):
            return Success(text[pos], pos + 1)
        return Failure(pos, frozenset({label}))
    return Parser(parse)


def char(c: str) -> Parser:
    return satisfy(lambda x: x == c, f'"{c}"')


def string(s: str) -> Parser:
    def parse(text: str, pos: int) -> Result:
        if text.startswith(s, pos):
            return Success(s, pos + len(s))
        return Failure(pos, frozenset({f'"{s}"'}))
    return Parser(parse)


def one_of(chars: str, label: str) -> Parser:
    return satisfy(lambda c: c in chars, label)


def none_of(chars: str, label: str) -> Parser:
    return satisfy(lambda c: c not in chars, label)


any_char = satisfy(lambda _: True, "any character")


# -------------------------------
# Sequencing and alternation
# -------------------------------
def seq(*parsers: Parser) -> Parser:
    """Run parsers one after another, collecting their values in a tuple."""
    def parse(text: str, pos: int) -> Result:
        values = []
        error: Optional[Failure] = None
        for p in parsers:
            result = p(text, pos)
            if isinstance(result, Failure):
                return merge_errors(error, result)
            values.append(result.value)
            pos = result.pos
            error = merge_errors(error, result.error)
        return Success(tuple(values), pos, error)
    return Parser(parse)


def choice(*parsers: Parser) -> Parser:
    """Ordered alternation: the first alternative to succeed wins."""
    if not parsers:
        raise ValueError("choice needs at least one alternative")

    def parse(text: str, pos: int) -> Result:
        error: Optional[Failure] = None
        for p in parsers:
            result = p(text, pos)
            if isinstance(result, Success):
                return result.with_error(merge_errors(error, result.error))
            if result.fatal:
                return result
            error = merge_errors(error, result)
        return error
    return Parser(parse)


def attempt(p: Parser) -> Parser:
    """Like Parsec's try: a failure of ``p``, even a fatal one, no longer ends an alternation."""
    def parse(text: str, pos: int) -> Result:
        result = p(text, pos)
        if isinstance(result, Failure) and result.fatal:
            return Failure(result.pos, result.expected, result.message)
        return result
    return Parser(parse)


# -------------------------------
# Repetition
# -------------------------------
def many(p: Parser) -> Parser:
    """Zero or more ``p``, as a list."""
    def parse(text: str, pos: int) -> Result:
        values: list[Any] = []
        error: Optional[Failure] = None
        while True:
            result = p(text, pos)
            if isinstance(result, Failure):
                if result.fatal:
                    return result
                return Success(values, pos, merge_errors(error, result))
            if result.pos == pos:
                raise ValueError("many applied to a parser that accepts an empty string")
            values.append(result.value)
            pos = result.pos
            error = merge_errors(error, result.error)
    return Parser(parse)


def many1(p: Parser) -> Parser:
    return seq(p, many(p)).map(lambda pair: [pair[0], *pair[1]])


def join(chars: Iterable[str]) -> str:
    return "".join(chars)
