"""Ports (interfaces) used by the search runner.

Ports define the minimal contracts for reading input and emitting results so
that the runner can be exercised without touching the real filesystem.
"""

from __future__ import annotations

from typing import Protocol


class ContentReaderPort(Protocol):
    """Source of the text being searched."""

    def read(self, path: str) -> str:
        ...


class LineSinkPort(Protocol):
    """Destination for matched lines shown to the user."""

    def write_line(self, line: str) -> None:
        ...


class ResultStorePort(Protocol):
    """Persistent copy of the matched lines."""

    @property
    def path(self) -> str:
        ...

    def reset(self) -> None:
        ...

    def append(self, line: str) -> None:
        ...
