"""Logging bootstrap for the record-actions editor.

// [LAW:single-enforcer] Handlers are attached to the "record_actions" logger here only.

Every module logs through logging.getLogger(__name__); configure() decides
where those records go. Environment overrides:

    RECORD_ACTIONS_LOG_LEVEL  level name (default INFO)
    RECORD_ACTIONS_LOG_FILE   exact log file path
    RECORD_ACTIONS_LOG_DIR    directory for timestamped log files
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "record_actions"
DEFAULT_LOG_DIR = "~/.local/share/record-actions/logs"

# Editor sessions are short; a few small files is plenty.
_MAX_BYTES = 1024 * 1024
_BACKUPS = 2


@dataclass(frozen=True)
class LoggingRuntime:
    level_name: str
    level: int
    file_path: str


_RUNTIME: LoggingRuntime | None = None


def _resolve_level() -> int:
    name = os.environ.get("RECORD_ACTIONS_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def _resolve_file() -> Path:
    explicit = os.environ.get("RECORD_ACTIONS_LOG_FILE")
    if explicit:
        return Path(explicit)
    log_dir = Path(os.environ.get("RECORD_ACTIONS_LOG_DIR") or os.path.expanduser(DEFAULT_LOG_DIR))
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return log_dir / f"record-actions-{stamp}-{os.getpid()}.log"


def configure(*, stream: bool = True) -> LoggingRuntime:
    """Attach a rotating file handler (and optionally stderr) to the package logger.

    Idempotent: later calls return the first runtime unchanged. The editor
    passes stream=False because stderr output would draw over the screen.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    level = _resolve_level()
    file_path = _resolve_file()
    file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(file_path, maxBytes=_MAX_BYTES, backupCount=_BACKUPS, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")
    )
    handlers: list[logging.Handler] = [file_handler]
    if stream:
        stderr_handler = logging.StreamHandler()
        stderr_handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
        handlers.append(stderr_handler)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        logger.addHandler(handler)

    _RUNTIME = LoggingRuntime(logging.getLevelName(level), level, str(file_path))
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    return _RUNTIME


def reset() -> None:
    """Drop handlers and forget the runtime so configure() runs again."""
    global _RUNTIME
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _RUNTIME = None
