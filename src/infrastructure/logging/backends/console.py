"""
Console Backend

Human-readable console output for development and tests.
"""

import sys
from datetime import datetime

from ..interfaces import LogBackend, LogRecord, LogLevel, LogType
from ..structs import ConsoleBackendConfig


class ConsoleBackend(LogBackend):
    """Plain console backend writing formatted text lines to stdout."""

    def __init__(self, config: ConsoleBackendConfig, name: str = "console"):
        if not isinstance(config, ConsoleBackendConfig):
            raise TypeError(f"Expected ConsoleBackendConfig, got {type(config)}")

        super().__init__(name)
        self.config = config
        self.enabled = config.enabled
        self.min_level = LogLevel[config.min_level.upper()]
        self.include_context = config.include_context
        self.max_message_length = config.max_message_length

    def should_handle(self, record: LogRecord) -> bool:
        if not self.enabled:
            return False
        if record.log_type == LogType.METRIC:
            return False
        return record.level >= self.min_level

    async def write(self, record: LogRecord) -> None:
        self.write_sync(record)

    def write_sync(self, record: LogRecord) -> None:
        sys.stdout.write(self._format(record) + "\n")

    async def flush(self) -> None:
        sys.stdout.flush()

    def _level_label(self, level: LogLevel) -> str:
        return level.name

    def _format(self, record: LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.timestamp).strftime("%H:%M:%S.%f")[:-3]
        message = record.message
        if len(message) > self.max_message_length:
            message = message[:self.max_message_length] + "..."

        line = f"{timestamp} {self._level_label(record.level):<8} {record.logger_name}: {message}"

        if self.include_context:
            extras = dict(record.context)
            if record.correlation_id:
                extras["correlation_id"] = record.correlation_id
            if record.stream:
                extras["stream"] = record.stream
            if extras:
                line += " | " + ", ".join(f"{k}={v}" for k, v in extras.items())
        return line


class ColorConsoleBackend(ConsoleBackend):
    """Console backend with ANSI-colored level labels."""

    _COLORS = {
        LogLevel.DEBUG: "\033[36m",
        LogLevel.INFO: "\033[32m",
        LogLevel.WARNING: "\033[33m",
        LogLevel.ERROR: "\033[31m",
        LogLevel.CRITICAL: "\033[35m",
    }
    _RESET = "\033[0m"

    def _level_label(self, level: LogLevel) -> str:
        return f"{self._COLORS.get(level, '')}{level.name}{self._RESET}"
