"""Application entry point for linescope."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from dotenv import find_dotenv, load_dotenv

import settings
from adapters.console import ConsoleSink
from adapters.file_reader import TextFileReader
from adapters.output_file import AppendingFileStore
from cli_args import build_config
from core.errors import SearchError
from core.runner import SearchRunner


def _configure_logging() -> None:
    """Set up stderr and rotating-file logging from the settings file, if enabled."""

    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    # stdout carries the matches, so console logging always goes to stderr.
    if config.get("console", True):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/linescope.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def build_runner() -> SearchRunner:
    return SearchRunner(
        reader=TextFileReader(settings.FILE_ENCODING),
        console=ConsoleSink(),
        result_store=AppendingFileStore(settings.OUTPUT_PATH, settings.FILE_ENCODING),
    )


def main(argv: Optional[list[str]] = None) -> None:
    _configure_logging()
    logger = logging.getLogger(__name__)

    # .env values only fill gaps; variables already exported keep priority.
    load_dotenv(find_dotenv(usecwd=True))
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = build_config(argv, os.environ)
    except SearchError as exc:
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    logger.info("Searching for %r in %s", config.query, config.file_path)
    try:
        build_runner().run(config)
    except SearchError as exc:
        logger.debug("Run aborted (%s)", exc.kind.value)
        print(f"Problem running search: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
