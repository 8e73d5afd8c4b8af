from __future__ import annotations

import pytest

from core.config import SearchConfig
from core.errors import ErrorKind, SearchIOError
from core.runner import SearchRunner

POEM = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."


class FakeReader:
    def __init__(self, files: dict[str, str]) -> None:
        self.files = files
        self.reads: list[str] = []

    def read(self, path: str) -> str:
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.files[path]


class FakeConsole:
    def __init__(self, events: list[tuple[str, str]]) -> None:
        self._events = events

    def write_line(self, line: str) -> None:
        self._events.append(("print", line))


class FakeStore:
    def __init__(self, events: list[tuple[str, str]], fail_after: "int | None" = None) -> None:
        self._events = events
        self._fail_after = fail_after
        self.lines: list[str] = []

    @property
    def path(self) -> str:
        return "output.txt"

    def reset(self) -> None:
        self._events.append(("reset", ""))
        self.lines.clear()

    def append(self, line: str) -> None:
        if self._fail_after is not None and len(self.lines) >= self._fail_after:
            raise PermissionError(13, "Permission denied", "output.txt")
        self._events.append(("append", line))
        self.lines.append(line)


def _runner(events: list[tuple[str, str]], store: "FakeStore | None" = None) -> SearchRunner:
    return SearchRunner(
        reader=FakeReader({"poem.txt": POEM}),
        console=FakeConsole(events),
        result_store=store if store is not None else FakeStore(events),
    )


def test_case_sensitive_run_prints_matches_only() -> None:
    events: list[tuple[str, str]] = []
    matches = _runner(events).run(SearchConfig(query="Rust", file_path="poem.txt"))
    assert matches == ["Rust:"]
    assert events == [("print", "Rust:")]


def test_ignore_case_dispatch() -> None:
    events: list[tuple[str, str]] = []
    config = SearchConfig(query="rUsT", file_path="poem.txt", ignore_case=True)
    assert _runner(events).run(config) == ["Rust:", "Trust me."]


def test_save_output_resets_before_first_line_and_interleaves() -> None:
    events: list[tuple[str, str]] = []
    store = FakeStore(events)
    config = SearchConfig(query="rust", file_path="poem.txt", ignore_case=True, save_output=True)
    _runner(events, store).run(config)
    assert events == [
        ("reset", ""),
        ("print", "Rust:"),
        ("append", "Rust:"),
        ("print", "Trust me."),
        ("append", "Trust me."),
    ]


def test_save_output_resets_even_without_matches() -> None:
    events: list[tuple[str, str]] = []
    config = SearchConfig(query="absent", file_path="poem.txt", save_output=True)
    assert _runner(events).run(config) == []
    assert events == [("reset", "")]


def test_store_untouched_without_save_output() -> None:
    events: list[tuple[str, str]] = []
    _runner(events).run(SearchConfig(query="e", file_path="poem.txt"))
    assert all(kind == "print" for kind, _ in events)


def test_read_failure_is_io_error_with_no_output() -> None:
    events: list[tuple[str, str]] = []
    config = SearchConfig(query="x", file_path="missing.txt", save_output=True)
    with pytest.raises(SearchIOError) as excinfo:
        _runner(events).run(config)
    assert excinfo.value.kind is ErrorKind.IO
    assert "missing.txt" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
    assert events == []


def test_append_failure_aborts_and_keeps_earlier_lines() -> None:
    events: list[tuple[str, str]] = []
    store = FakeStore(events, fail_after=1)
    config = SearchConfig(query="rust", file_path="poem.txt", ignore_case=True, save_output=True)
    with pytest.raises(SearchIOError) as excinfo:
        _runner(events, store).run(config)
    assert "output.txt" in str(excinfo.value)
    assert store.lines == ["Rust:"]
    assert events == [
        ("reset", ""),
        ("print", "Rust:"),
        ("append", "Rust:"),
        ("print", "Trust me."),
    ]


class UndecodableReader:
    def read(self, path: str) -> str:
        return b"\xff".decode("utf-8")


def test_decode_failure_is_io_error() -> None:
    events: list[tuple[str, str]] = []
    runner = SearchRunner(
        reader=UndecodableReader(),
        console=FakeConsole(events),
        result_store=FakeStore(events),
    )
    config = SearchConfig(query="x", file_path="bad.txt", save_output=True)
    with pytest.raises(SearchIOError) as excinfo:
        runner.run(config)
    assert excinfo.value.kind is ErrorKind.IO
    assert "could not read bad.txt" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert events == []
