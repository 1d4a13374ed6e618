"""
Provides structured logging with log levels, console output and rotating log files.

This module provides a structured logging system with UTC timestamps, log levels,
and key-value pair formatting for better log parsing and analysis. A single
`Logger` is built per process with `setup_logging` and handed to every component
that needs to report what it is doing.
"""
import logging
import time
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict

from tqdm import tqdm

from .constants import DEFAULT_LOG_BACKUP_COUNT, DEFAULT_LOG_MAX_BYTES, LOG_FILE_NAME

_separator = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Look up a level by name, accepting WARNING as an alias of WARN."""
        name = name.strip().upper()
        if name == "WARNING":
            name = "WARN"
        return cls[name]


logging.addLevelName(LogLevel.TRACE.value, "TRACE")


def _level_name(levelno: int) -> str:
    try:
        return LogLevel(levelno).name
    except ValueError:
        return logging.getLevelName(levelno)


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        elif isinstance(value, Path):
            parts.append(f'{key}="{value}"')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


class _StructuredFormatter(logging.Formatter):
    """Render records as `timestamp | [LEVEL] | event | k=v | ...` in UTC."""

    converter = time.gmtime

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        header = f"{self.formatTime(record, self.datefmt)}{_separator}[{_level_name(record.levelno)}]{_separator}{record.getMessage()}"
        fields = getattr(record, "fields", None)
        if fields:
            return f"{header}{_separator}{_format_kv(fields)}"
        return header


class _TqdmHandler(logging.Handler):
    """Console handler that writes through tqdm so progress bars stay intact."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record))
        except Exception:
            self.handleError(record)


class Logger:
    """
    Structured event logger.

    Wraps a standard library logger so the handlers (console, rotating file) are
    plain `logging` handlers, while callers keep the event/key-value style:

        logger.info("transfer.copy", source=src, destination=dst)
    """

    def __init__(self, name: str = "torrentproc", level: LogLevel = LogLevel.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.value)

    @property
    def std_logger(self) -> logging.Logger:
        return self._logger

    def log(self, event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
        """
        Structured logging function.

        Args:
            event: Event name (e.g., 'transfer.copy', 'rename.fallback')
            level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
            **kwargs: Key-value pairs to log
        """
        self._logger.log(level.value, event, extra={"fields": kwargs})

    def trace(self, event: str, **kwargs) -> None:
        self.log(event, LogLevel.TRACE, **kwargs)

    def debug(self, event: str, **kwargs) -> None:
        self.log(event, LogLevel.DEBUG, **kwargs)

    def info(self, event: str, **kwargs) -> None:
        self.log(event, LogLevel.INFO, **kwargs)

    def warn(self, event: str, **kwargs) -> None:
        self.log(event, LogLevel.WARN, **kwargs)

    def error(self, event: str, **kwargs) -> None:
        self.log(event, LogLevel.ERROR, **kwargs)


def setup_logging(
        command: str,
        log_level: LogLevel = LogLevel.INFO,
        log_dir: Path | None = None,
        enable_console: bool = True,
        max_bytes: int = DEFAULT_LOG_MAX_BYTES,
        backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
) -> Logger:
    """
    Build the process logger.

    Any handlers left over from a previous setup are removed first so calling
    this twice does not duplicate output.

    Args:
        command: Subcommand name, used in the log file name.
        log_level: Minimum level to emit.
        log_dir: Directory for the rotating log file. No file is written when None.
        enable_console: Also write every line to the console.
        max_bytes: Size at which the log file is rotated.
        backup_count: Number of rotated files kept.

    Returns:
        The configured Logger.
    """
    logger = Logger(level=log_level)
    std_logger = logger.std_logger
    for handler in list(std_logger.handlers):
        std_logger.removeHandler(handler)
        handler.close()

    formatter = _StructuredFormatter()

    if enable_console:
        console = _TqdmHandler()
        console.setFormatter(formatter)
        std_logger.addHandler(console)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME.format(command=command),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        std_logger.addHandler(file_handler)

    return logger
