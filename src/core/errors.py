"""Error types surfaced by the search pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported to the user."""

    MISSING_ARGUMENT = "missing_argument"
    IO = "io"


class SearchError(Exception):
    """Base class for every fatal linescope failure."""

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingArgumentError(SearchError):
    """A required positional argument was not supplied."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, argument: str) -> None:
        super().__init__(f"missing required argument: {argument}")
        self.argument = argument


class SearchIOError(SearchError):
    """Reading the input or persisting results failed."""

    kind = ErrorKind.IO

    def __init__(self, operation: str, path: str, error: Exception) -> None:
        # Decode errors carry no strerror; their str() names the bad byte.
        reason = getattr(error, "strerror", None) or str(error)
        super().__init__(f"could not {operation} {path}: {reason}")
        self.operation = operation
        self.path = path
