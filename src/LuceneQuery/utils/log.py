"""Logging for the LuceneQuery CLI and template compiler.

Records look like ``10-19 14:02:11 [INFO] Compiled 3 queries``. Console output
goes to stderr by default so it never mixes with queries printed on stdout.
The query primitives themselves never log.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Final, TextIO

_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATEFMT: Final[str] = "%m-%d %H:%M:%S"
_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("LuceneQuery")


def _console_handler(level: int, stream: TextIO | None) -> logging.Handler:
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    return handler


def _action_file_handler(action: str, log_dir: str) -> logging.Handler:
    """One file per run: ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``, at DEBUG."""
    action_dir = Path(log_dir or "log") / action
    action_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%m%d%H%M%S")
    handler = logging.FileHandler(action_dir / f"{action}_{stamp}.log", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
    stream: TextIO | None = None,
) -> None:
    """Replace the handlers of the LuceneQuery logger.

    Args:
        level: Console level name (e.g., INFO, DEBUG); unknown names fall back
            to INFO.
        action: CLI command name; required for file logging.
        log_to_file: Also write a DEBUG log file for this run.
        log_dir: Base directory for log files.
        stream: Console stream; stderr when omitted.
    """
    console_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    handlers = [_console_handler(console_level, stream)]
    if log_to_file and action:
        handlers.append(_action_file_handler(action, log_dir))

    formatter = _AbbrevLevelFormatter(fmt=_FORMAT, datefmt=_DATEFMT)
    for handler in log.handlers:
        handler.close()
    log.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        log.addHandler(handler)

    # file handler receives DEBUG regardless of the console level
    log.setLevel(min(logging.DEBUG, console_level))
    log.propagate = False
