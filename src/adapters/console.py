"""Console adapter that prints matched lines."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _ensure_utf8(stream: TextIO) -> TextIO:
    """Switch a text stream to UTF-8 when the locale picked something else."""

    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")
    return stream


class ConsoleSink:
    """Writes each line to a text stream (stdout unless told otherwise)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        # Resolve stdout lazily so redirected streams (pytest capsys) are honoured.
        stream = _ensure_utf8(self._stream or sys.stdout)
        stream.write(f"{line}\n")
