"""Filesystem adapter that loads the searched file."""

from __future__ import annotations


class TextFileReader:
    """Reads whole files as text, satisfying the ContentReaderPort contract."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, path: str) -> str:
        # newline="" keeps "\r\n" intact; line splitting is left to the core.
        with open(path, "r", encoding=self._encoding, newline="") as handle:
            return handle.read()
