"""Process-wide logging with a global level filter and a replaceable appender."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message; higher values are more verbose."""

    OFF = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


class LogAppender(ABC):
    """Destination that receives every message passing the level filter."""

    @abstractmethod
    def emit(self, log_level: LogLevel, msg: str) -> None:
        """Output one message."""


_PREFIXES = {
    LogLevel.TRACE: "[TRACE] ",
    LogLevel.DEBUG: "[DEBUG] ",
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARNING: "[WARNING] ",
    LogLevel.ERROR: "[ERROR] ",
}


class ConsoleAppender(LogAppender):
    """Writes messages to standard output, prefixed with the level name."""

    def emit(self, log_level: LogLevel, msg: str) -> None:
        prefix = _PREFIXES[LogLevel(log_level)]
        print(f"{prefix}{msg}", file=sys.stdout, flush=True)


class _LoggerConfig:
    __slots__ = ("level", "appender")

    def __init__(self) -> None:
        self.level = LogLevel.INFO
        self.appender: LogAppender = ConsoleAppender()


_config = _LoggerConfig()


def set_log_level(level: LogLevel) -> None:
    """Set the most verbose level that is still emitted; OFF silences everything."""
    _config.level = LogLevel(level)


def set_appender(appender: LogAppender) -> None:
    """Replace the appender used for all messages."""
    _config.appender = appender


def log(level: LogLevel, message: str) -> None:
    """Emit a message if its level passes the global filter."""
    if _config.level != LogLevel.OFF and level <= _config.level:
        _config.appender.emit(LogLevel(level), message)