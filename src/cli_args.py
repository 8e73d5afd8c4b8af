"""Command-line argument resolution.

Turns the raw argument list plus an environment mapping into the core
SearchConfig. The environment is passed in instead of read from the process
so the precedence rules can be tested without touching os.environ.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Mapping, Optional, Sequence, Tuple

import settings
from core.config import SearchConfig, resolve_ignore_case

LOGGER = logging.getLogger(__name__)

FLAGS = ("--ignore-case", "--save-output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linescope",
        description="Print the lines of a file that contain a query string.",
        allow_abbrev=False,
        add_help=False,
    )
    # Positionals are optional here so a missing one is reported as a
    # MissingArgumentError instead of argparse's own usage exit.
    parser.add_argument("query", nargs="?", help="Text to look for")
    parser.add_argument("file_path", nargs="?", help="File to search")
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help=f"Match regardless of letter case (also enabled by ${settings.IGNORE_CASE_ENV})",
    )
    parser.add_argument(
        "--save-output",
        action="store_true",
        help=f"Also write the matching lines to {settings.OUTPUT_PATH}",
    )
    return parser


def _split_unparseable(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Separate tokens argparse would reject outright from the rest.

    "--flag=value" forms of our flags and the "--" separator only count as
    unrecognized tokens here, so they are set aside before parsing.
    """

    kept: List[str] = []
    dropped: List[str] = []
    for token in argv:
        if token == "--" or token.startswith(tuple(f"{flag}=" for flag in FLAGS)):
            dropped.append(token)
        else:
            kept.append(token)
    return kept, dropped


def build_config(
    argv: Sequence[str],
    environ: Mapping[str, str],
    parser: Optional[argparse.ArgumentParser] = None,
) -> SearchConfig:
    """Resolve the run configuration from arguments and environment.

    Unknown flags and surplus positionals are ignored rather than rejected.
    A missing query or file path raises MissingArgumentError.
    """

    parser = parser or build_parser()
    tokens, dropped = _split_unparseable(argv)
    args, ignored = parser.parse_known_intermixed_args(tokens)
    ignored = dropped + ignored
    if ignored:
        LOGGER.debug("Ignoring unrecognized arguments: %s", ignored)

    env_default = settings.IGNORE_CASE_ENV in environ
    return SearchConfig(
        query=args.query or "",
        file_path=args.file_path or "",
        ignore_case=resolve_ignore_case(env_default, args.ignore_case),
        save_output=args.save_output,
    )
