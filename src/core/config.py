"""Core configuration dataclasses.

We keep argument parsing outside the core, but this dataclass defines the
shape the runner expects so the entry point can build it safely.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import MissingArgumentError


@dataclass(frozen=True)
class SearchConfig:
    """Settings for a single search run."""

    query: str
    file_path: str
    ignore_case: bool = False
    save_output: bool = False

    def __post_init__(self) -> None:
        if not self.query:
            raise MissingArgumentError("query")
        if not self.file_path:
            raise MissingArgumentError("file path")


def resolve_ignore_case(env_default: bool, flag: bool) -> bool:
    """Combine the environment default with the ``--ignore-case`` flag.

    The flag is additive: it can switch case-insensitive matching on but
    never off, so an environment default of ``True`` always wins.
    """

    return env_default or flag
