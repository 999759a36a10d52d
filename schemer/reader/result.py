"""Parse results threaded through the reader's combinators.

Every parser is a pure function of ``(text, pos)``. It answers with a
:class:`Success` carrying the new position, or a :class:`Failure` saying
where it gave up and what it expected there. Nothing is mutated, so a
caller that wants to backtrack simply retries from the position it still
holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Failure:
    pos: int
    expected: frozenset[str] = frozenset()
    message: Optional[str] = None
    # A fatal failure is final: ordered choice does not try later alternatives.
    fatal: bool = False

    def expecting(self, label: str) -> Failure:
        return Failure(self.pos, frozenset({label}), self.message, self.fatal)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    pos: int
    # Furthest failure seen on the way to this success, kept for error reporting.
    error: Optional[Failure] = None

    def with_error(self, error: Optional[Failure]) -> Success[T]:
        return Success(self.value, self.pos, error)


Result = Union[Success[Any], Failure]


def merge_errors(a: Optional[Failure], b: Optional[Failure]) -> Optional[Failure]:
    """Keep whichever failure got further; at the same position, union what was expected."""
    if a is None:
        return b
    if b is None:
        return a
    if b.fatal:
        return b
    if a.fatal:
        return a
    if a.pos > b.pos:
        return a
    if b.pos > a.pos:
        return b
    return Failure(a.pos, a.expected | b.expected, a.message or b.message)
