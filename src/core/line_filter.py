"""Substring line filtering (core domain)."""

from __future__ import annotations

from typing import Iterator, List

MatchSet = List[str]


def iter_lines(contents: str) -> Iterator[str]:
    """Yield the lines of ``contents`` in order.

    Lines end at ``\\n``; a ``\\r`` right before it is dropped as well. A
    trailing newline does not produce an extra empty line.
    """

    if not contents:
        return
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def search(query: str, contents: str) -> MatchSet:
    """Return every line of ``contents`` containing ``query`` verbatim."""

    return [line for line in iter_lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> MatchSet:
    """Return every line containing ``query`` regardless of letter case.

    Both sides go through ``str.lower`` so the comparison does not depend on
    the process locale. Matched lines are returned as they appear in the file.
    """

    lowered = query.lower()
    return [line for line in iter_lines(contents) if lowered in line.lower()]
