# backend/collab/pagination.py
"""
`start` / `end` query parameters → a clamped slice of the question list.

Both parameters or neither: one alone is rejected. Without parameters the
range is unbounded (`end=None`) and clamps to whatever the list holds.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple, TypeVar

from .errors import MissingParameters, ParseError, StartGreaterThanEnd

T = TypeVar("T")

# ASCII digits with an optional '+', like an unsigned integer parser
_UINT_RX = re.compile(r"\+?[0-9]+")
# same as the default int() string-conversion cap on 3.11+
_MAX_DIGITS = 4300


@dataclass(frozen=True)
class Pagination:
    start: int = 0
    end: Optional[int] = None  # None = no upper bound

    def bounds(self, length: int) -> Tuple[int, int]:
        """Half-open `[lo, hi)` range that is always inside `[0, length]`."""
        hi = length if self.end is None else min(self.end, length)
        lo = min(self.start, length)
        return lo, max(lo, hi)

    def apply(self, items: Sequence[T]) -> list[T]:
        lo, hi = self.bounds(len(items))
        return list(items[lo:hi])


def parse_bound(raw: str) -> int:
    if raw == "":
        raise ParseError("cannot parse integer from empty string")
    if not _UINT_RX.fullmatch(raw):
        raise ParseError("invalid digit found in string")
    if len(raw.lstrip("+").lstrip("0")) > _MAX_DIGITS:
        raise ParseError("number too large to fit in target type")
    try:
        return int(raw)
    except ValueError as e:
        # PYTHONINTMAXSTRDIGITS can set a lower cap
        raise ParseError("number too large to fit in target type") from e


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """
    Resolve the query mapping into a Pagination.

    Raises:
        ParseError: a bound is not a non-negative integer.
        StartGreaterThanEnd: both bounds parse but start > end.
        MissingParameters: only one of the two bounds was given.
    """
    has_start = "start" in params
    has_end = "end" in params

    if has_start and has_end:
        pagination = Pagination(
            start=parse_bound(params["start"]),
            end=parse_bound(params["end"]),
        )
        if pagination.start > pagination.end:
            raise StartGreaterThanEnd(pagination)
        return pagination

    if not has_start and not has_end:
        return Pagination()

    raise MissingParameters()
