"""Result file adapter.

Implements the core ResultStorePort with a plain text file holding one
matched line per line.
"""

from __future__ import annotations

import logging
import os

LOGGER = logging.getLogger(__name__)


class AppendingFileStore:
    """Append-only text file that is cleared at the start of every run."""

    def __init__(self, path: str, encoding: str = "utf-8") -> None:
        self._path = path
        self._encoding = encoding

    @property
    def path(self) -> str:
        return self._path

    def reset(self) -> None:
        """Remove the file left by a previous run, if there is one."""

        try:
            os.remove(self._path)
        except FileNotFoundError:
            LOGGER.debug("No previous result file at %s", self._path)
            return
        LOGGER.debug("Removed previous result file %s", self._path)

    def append(self, line: str) -> None:
        """Append one line, opening and closing the file for this line only.

        A run that dies halfway leaves a file made of whole lines only.
        """

        with open(self._path, "a", encoding=self._encoding, newline="\n") as handle:
            handle.write(f"{line}\n")
