# src/taskpulse/logging_setup.py

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_NAME = "taskpulse.log"
LOG_FILE_MAX_BYTES = 2_000_000
LOG_FILE_BACKUPS = 3

# Libraries that log every request at INFO.
_TRANSPORT_LOGGERS = ("mcp", "uvicorn", "httpx", "httpcore", "sse_starlette")


def _is_transport_logger(name: str) -> bool:
    return any(name == prefix or name.startswith(prefix + ".") for prefix in _TRANSPORT_LOGGERS)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Console gets everything from taskpulse.*, transport libraries only from
    WARNING, and the rest of the world (including captured py.warnings)
    only from ERROR.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("taskpulse."):
            return True
        if _is_transport_logger(record.name):
            return record.levelno >= logging.WARNING
        return record.levelno >= logging.ERROR


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """'debug' / 'INFO' / ... -> logging level; unknown names give `default`."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpulse",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the console and file handlers on the root logger.

    The console handler writes to stderr: with the stdio transport, stdout
    belongs to the MCP protocol stream. The file handler keeps DEBUG records
    and rotates. Returns the log file path.

    Call once, before the first log record.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(_ConsoleNoiseFilter())

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in (console, file_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # warnings.warn(...) -> 'py.warnings' logger
    logging.captureWarnings(True)
    return log_file
