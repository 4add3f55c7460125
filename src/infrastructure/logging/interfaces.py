"""
Core Logging Interfaces

Defines the record type, backend contract, router contract and logger
interface used by every session component.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional


class LogLevel(IntEnum):
    """Log levels with numeric values for fast comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class LogType(IntEnum):
    """Log types for routing decisions."""
    TEXT = 1
    METRIC = 2
    AUDIT = 3


@dataclass
class LogRecord:
    """
    Lightweight log record passed from loggers to backends.

    Formatting happens in backends, not here.
    """
    timestamp: float
    level: LogLevel
    log_type: LogType
    logger_name: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)

    # Only used when log_type == METRIC
    metric_name: Optional[str] = None
    metric_value: Optional[float] = None
    metric_tags: Optional[Dict[str, Any]] = None

    # Correlation tracking
    correlation_id: Optional[str] = None
    stream: Optional[str] = None

    @classmethod
    def create_text(cls, level: LogLevel, logger_name: str, message: str, **context) -> 'LogRecord':
        return cls(
            timestamp=time.time(),
            level=level,
            log_type=LogType.TEXT,
            logger_name=logger_name,
            message=message,
            context=context
        )

    @classmethod
    def create_metric(cls, logger_name: str, metric_name: str, value: float, **tags) -> 'LogRecord':
        return cls(
            timestamp=time.time(),
            level=LogLevel.INFO,
            log_type=LogType.METRIC,
            logger_name=logger_name,
            message="",
            metric_name=metric_name,
            metric_value=value,
            metric_tags=tags
        )


class LogBackend(ABC):
    """
    Abstract base for all logging backends.

    Each backend handles its own formatting and output.
    """

    def __init__(self, name: str):
        self.name = name
        self.enabled = True
        self.min_level = LogLevel.DEBUG
        self._error_count = 0
        self._max_errors = 10

    @abstractmethod
    def should_handle(self, record: LogRecord) -> bool:
        """Fast check if this backend should process the record."""
        pass

    @abstractmethod
    async def write(self, record: LogRecord) -> None:
        """Write record to the backend destination."""
        pass

    @abstractmethod
    async def flush(self) -> None:
        pass

    def write_sync(self, record: LogRecord) -> None:
        """Synchronous write used when no event loop is running. Optional."""
        pass

    def _handle_error(self, error: Exception) -> None:
        """Count backend errors and disable the backend after too many."""
        self._error_count += 1
        if self._error_count >= self._max_errors:
            self.enabled = False


class LogRouter(ABC):
    """Routes log records to backends."""

    @abstractmethod
    def get_backends(self, record: LogRecord) -> List[LogBackend]:
        pass


class HFTLoggerInterface(ABC):
    """
    Logger interface injected into session components as ``self.logger``.

    Keyword arguments on every call are structured context, e.g.
    ``logger.debug("Dispatching action", id=3, method="subscribe")``.
    """

    @abstractmethod
    def debug(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def critical(self, msg: str, **context) -> None:
        pass

    @abstractmethod
    def metric(self, name: str, value: float, **tags) -> None:
        pass

    @abstractmethod
    def latency(self, operation: str, duration_ms: float, **tags) -> None:
        pass

    @abstractmethod
    def counter(self, name: str, value: int = 1, **tags) -> None:
        pass

    @abstractmethod
    def set_context(self, **context) -> None:
        """Set persistent context for all logs from this logger."""
        pass

    @abstractmethod
    async def flush(self) -> None:
        pass
