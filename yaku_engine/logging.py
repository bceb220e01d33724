"""Root logger setup for the engine and its HTTP adapter."""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from yaku_engine.config import Settings, settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_STAMP = "%Y%m%dT%H%M%SZ"


def _log_file(log_dir: Path | str) -> Path:
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / f"yaku_engine-{datetime.now(tz=UTC).strftime(LOG_FILE_STAMP)}.log"


def setup_logging(
    log_dir: Path | str | None = None,
    level: int | str | None = None,
    config: Settings | None = None,
) -> Path | None:
    """Route every record to stdout and, with a log directory, to a stamped file.

    Arguments left as None fall back to ``config`` (the module settings by
    default). Returns the log file path, or None when logging to stdout only.
    """
    config = config or settings
    log_dir = log_dir if log_dir is not None else config.log_dir
    level = level if level is not None else config.log_level

    formatter = logging.Formatter(config.log_format, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    path = _log_file(log_dir) if log_dir is not None else None
    if path is not None:
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    logging.getLogger(__name__).debug("logging configured: level=%s file=%s", level, path)
    return path

