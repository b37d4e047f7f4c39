"""Logging bootstrap for the diffview runtime.

Every module logs through `logging.getLogger(__name__)` under the "diffview"
logger; configure() is the only place that attaches handlers to it. While the
TUI owns the terminal, stderr only carries warnings and errors. The rotating
log file gets everything at the configured level.

// [LAW:single-enforcer] Logger handler wiring is enforced in this module only.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "diffview"
DEFAULT_LOG_DIR = "~/.local/share/diffview/logs"

LOG_FILE_MAX_BYTES = 20 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_STDERR_FORMAT = "diffview: %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(threadName)s] %(message)s"


@dataclass(frozen=True)
class LoggingRuntime:
    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None


def _resolve_level(raw: str | None) -> int:
    # getLevelName maps a known name to its number and anything else to a string.
    value = logging.getLevelName(str(raw or "INFO").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _log_file_path() -> Path:
    explicit = os.environ.get("DIFFVIEW_LOG_FILE")
    if explicit:
        return Path(explicit)
    log_dir = Path(os.path.expanduser(os.environ.get("DIFFVIEW_LOG_DIR", DEFAULT_LOG_DIR)))
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return log_dir / "diffview-{}-{}.log".format(stamp, os.getpid())


def _build_handlers(level: int, file_path: Path) -> list[logging.Handler]:
    stderr = logging.StreamHandler()
    stderr.setLevel(max(level, logging.WARNING))
    stderr.setFormatter(logging.Formatter(_STDERR_FORMAT))

    rotating = RotatingFileHandler(
        file_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    rotating.setLevel(level)
    rotating.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return [stderr, rotating]


def configure(level: str | None = None) -> LoggingRuntime:
    """Attach the stderr and log-file handlers to the diffview logger.

    An explicit level wins over DIFFVIEW_LOG_LEVEL; unknown names mean INFO.
    Calling it again returns the first runtime and changes nothing.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level_value = _resolve_level(level or os.environ.get("DIFFVIEW_LOG_LEVEL"))
    file_path = _log_file_path()
    file_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level_value)
    logger.propagate = False
    logger.handlers.clear()
    for handler in _build_handlers(level_value, file_path):
        logger.addHandler(handler)

    _RUNTIME = LoggingRuntime(
        level_name=logging.getLevelName(level_value),
        level=level_value,
        file_path=str(file_path),
    )
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    return _RUNTIME


def reset() -> None:
    """Detach handlers and forget the configured runtime."""
    global _RUNTIME
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _RUNTIME = None
