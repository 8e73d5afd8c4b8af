"""Core search run orchestration.

This module is I/O-agnostic. It only relies on ports for reading input and
emitting results, so the same flow serves the CLI and the tests.
"""

from __future__ import annotations

import logging
from typing import Optional

from core.config import SearchConfig
from core.errors import SearchIOError
from core.line_filter import MatchSet, search, search_case_insensitive
from core.ports import ContentReaderPort, LineSinkPort, ResultStorePort

LOGGER = logging.getLogger(__name__)


class SearchRunner:
    """Reads the input, filters it and routes matches to the sinks."""

    def __init__(
        self,
        reader: ContentReaderPort,
        console: LineSinkPort,
        result_store: Optional[ResultStorePort] = None,
    ) -> None:
        self._reader = reader
        self._console = console
        self._result_store = result_store

    def run(self, config: SearchConfig) -> MatchSet:
        """Execute one search and return the matched lines in file order."""

        try:
            contents = self._reader.read(config.file_path)
        except (OSError, UnicodeDecodeError) as exc:
            raise SearchIOError("read", config.file_path, exc) from exc

        if config.ignore_case:
            matches = search_case_insensitive(config.query, contents)
        else:
            matches = search(config.query, contents)
        LOGGER.info(
            "%s matching lines for %r in %s (ignore_case=%s)",
            len(matches),
            config.query,
            config.file_path,
            config.ignore_case,
        )

        store = self._result_store if config.save_output else None
        if config.save_output and store is None:
            raise RuntimeError("save_output requires a result store")

        # The previous run's results are dropped before anything is written so
        # the file never mixes output from two runs.
        if store is not None:
            try:
                store.reset()
            except OSError as exc:
                raise SearchIOError("reset", store.path, exc) from exc

        for line in matches:
            self._console.write_line(line)
            if store is None:
                continue
            try:
                store.append(line)
            except OSError as exc:
                raise SearchIOError("append to", store.path, exc) from exc

        if store is not None:
            LOGGER.info("Saved %s lines to %s", len(matches), store.path)
        return matches
