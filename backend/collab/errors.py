# backend/collab/errors.py
"""
Error types for the questions service.

Pagination errors are client-input errors: main.py turns them into
416 plain-text responses. StoreLoadError only happens at startup and
stops the process before it serves anything.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type

if TYPE_CHECKING:
    from .pagination import Pagination


class CollabError(Exception):
    """Base class for every error raised by the service."""


# =========================================================
# Pagination (416)
# =========================================================
class PaginationError(CollabError):
    """A `start`/`end` pair that cannot be turned into a range."""


class ParseError(PaginationError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Cannot parse parameter: {detail}")


class MissingParameters(PaginationError):
    def __init__(self) -> None:
        super().__init__("Missing parameter")


class StartGreaterThanEnd(PaginationError):
    def __init__(self, pagination: "Pagination") -> None:
        self.pagination = pagination
        super().__init__(
            f"Start greater end: start={pagination.start}, end={pagination.end}"
        )


# =========================================================
# Policy (403)
# =========================================================
class CorsRejected(CollabError):
    """Cross-origin request outside the configured policy."""

    def __init__(self, reason: str = "origin not allowed") -> None:
        self.reason = reason
        super().__init__(f"CORS request forbidden: {reason}")


# =========================================================
# Startup
# =========================================================
class StoreLoadError(CollabError):
    """Raised when the question data file cannot be turned into a store."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load questions from {path}: {reason}")


# =========================================================
# Error → HTTP status
# =========================================================
# checked in order, most specific first
ERROR_STATUS: Dict[Type[CollabError], int] = {
    PaginationError: 416,
    CorsRejected: 403,
}


def status_for(exc: CollabError) -> int:
    for kind, status in ERROR_STATUS.items():
        if isinstance(exc, kind):
            return status
    return 500
