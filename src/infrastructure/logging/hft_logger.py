"""
HFT Logger Implementation

Logger with a ring buffer and an async dispatch task so log calls never block
the stream pumps. WARNING and above are also propagated immediately to the
stdlib ``logging`` tree.
"""

import asyncio
import logging
import os
import time
import weakref
from typing import Dict, List, Optional, Any

from .interfaces import HFTLoggerInterface, LogBackend, LogRouter, LogRecord, LogLevel, LogType
from .ring_buffer import RingBuffer
from .structs import PerformanceConfig

_PY_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


class HFTLogger(HFTLoggerInterface):
    """
    Logger with async dispatch to multiple backends.

    - Log calls only build a record and push it into the ring buffer
    - A dispatch task drains the buffer in batches when a loop is running
    - Without a running loop records are written synchronously
    """

    _instances = weakref.WeakSet()

    def __init__(self, name: str, backends: List[LogBackend], router: LogRouter, config: PerformanceConfig,
                 default_context: Optional[Dict[str, Any]] = None):
        if not isinstance(config, PerformanceConfig):
            raise TypeError(f"Expected PerformanceConfig, got {type(config)}")

        self.name = name
        self.backends = backends
        self.router = router
        self.perf_config = config
        self.batch_size = config.batch_size
        self.dispatch_interval = config.dispatch_interval

        self.context: Dict[str, Any] = dict(default_context or {})

        self._buffer: RingBuffer[LogRecord] = RingBuffer(config.buffer_size)
        self._dispatch_task: Optional[asyncio.Task] = None
        self._shutdown_event: Optional[asyncio.Event] = None

        self._py_logger = logging.getLogger(name)
        environment = os.getenv('ENVIRONMENT', 'dev').lower()
        if environment in ('dev', 'development', 'local', 'test'):
            self._py_logger.propagate = True

        HFTLogger._instances.add(self)

    @property
    def propagate(self) -> bool:
        return self._py_logger.propagate

    @propagate.setter
    def propagate(self, value: bool) -> None:
        self._py_logger.propagate = value

    def _ensure_dispatch(self) -> bool:
        """Start the dispatch task if a loop is running. Returns True if dispatch is async."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return False
        task = self._dispatch_task
        if task is not None and not task.done() and task.get_loop() is loop:
            return True
        self._shutdown_event = asyncio.Event()
        self._dispatch_task = loop.create_task(self._dispatch_loop(), name=f"log.dispatch.{self.name}")
        return True

    async def _dispatch_loop(self) -> None:
        while not self._shutdown_event.is_set():
            batch = self._buffer.get_batch(self.batch_size)
            if batch:
                await self._process_batch(batch)
            else:
                await asyncio.sleep(self.dispatch_interval)

    async def _process_batch(self, batch: List[LogRecord]) -> None:
        for record in batch:
            for backend in self.router.get_backends(record):
                if backend.enabled and backend.should_handle(record):
                    try:
                        await backend.write(record)
                    except Exception as e:
                        backend._handle_error(e)

    def _dispatch_sync(self, record: LogRecord) -> None:
        for backend in self.router.get_backends(record):
            if backend.enabled and backend.should_handle(record):
                try:
                    backend.write_sync(record)
                except Exception as e:
                    backend._handle_error(e)

    def _emit(self, record: LogRecord) -> None:
        if self._ensure_dispatch():
            self._buffer.put_nowait(record)
        else:
            self._dispatch_sync(record)

    def _log(self, level: LogLevel, msg: str, log_type: LogType = LogType.TEXT, **context) -> None:
        full_context = {**self.context, **context}
        correlation_id = full_context.pop('correlation_id', None)
        stream = full_context.pop('stream', None)

        if level >= LogLevel.WARNING and self._py_logger.propagate:
            extra = f" | {full_context}" if full_context else ""
            self._py_logger.log(_PY_LEVELS[level], f"{msg}{extra}")
            return

        record = LogRecord.create_text(level, self.name, msg, **full_context)
        record.log_type = log_type
        record.correlation_id = None if correlation_id is None else str(correlation_id)
        record.stream = stream
        self._emit(record)

    def debug(self, msg: str, **context) -> None:
        self._log(LogLevel.DEBUG, msg, **context)

    def info(self, msg: str, **context) -> None:
        self._log(LogLevel.INFO, msg, **context)

    def warning(self, msg: str, **context) -> None:
        self._log(LogLevel.WARNING, msg, **context)

    def error(self, msg: str, **context) -> None:
        self._log(LogLevel.ERROR, msg, **context)

    def critical(self, msg: str, **context) -> None:
        self._log(LogLevel.CRITICAL, msg, **context)

    def audit(self, event: str, **context) -> None:
        self._log(LogLevel.INFO, event, LogType.AUDIT, **context)

    def metric(self, name: str, value: float, **tags) -> None:
        full_tags = {**self.context, **tags}
        record = LogRecord.create_metric(self.name, name, value, **full_tags)
        self._emit(record)

    def latency(self, operation: str, duration_ms: float, **tags) -> None:
        self.metric(f"{operation}_latency_ms", duration_ms, **tags)

    def counter(self, name: str, value: int = 1, **tags) -> None:
        self.metric(f"{name}_count", float(value), **tags)

    def set_context(self, **context) -> None:
        self.context.update(context)

    async def flush(self) -> None:
        remaining = self._buffer.get_batch(self._buffer.size())
        if remaining:
            await self._process_batch(remaining)
        for backend in self.backends:
            await backend.flush()

    def get_performance_stats(self) -> Dict[str, Any]:
        return {
            "buffer_size": self._buffer.size(),
            "buffer_dropped": self._buffer.dropped_count(),
            "dispatch_task_running": self._dispatch_task is not None and not self._dispatch_task.done(),
            "backends_enabled": sum(1 for b in self.backends if b.enabled),
        }

    async def shutdown(self) -> None:
        if self._shutdown_event:
            self._shutdown_event.set()
        if self._dispatch_task and not self._dispatch_task.done():
            try:
                await asyncio.wait_for(self._dispatch_task, timeout=5.0)
            except asyncio.TimeoutError:
                self._dispatch_task.cancel()
        await self.flush()

    @classmethod
    async def shutdown_all(cls) -> None:
        await asyncio.gather(*(logger.shutdown() for logger in list(cls._instances)), return_exceptions=True)


class LoggingTimer:
    """Context manager timing an operation and logging its latency."""

    def __init__(self, logger: HFTLoggerInterface, operation: str, **tags):
        self.logger = logger
        self.operation = operation
        self.tags = tags
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.perf_counter()
        self.logger.latency(self.operation, self.elapsed_ms, **self.tags)
        if exc_type is not None:
            self.logger.error(f"{self.operation} failed", error_type=exc_type.__name__, **self.tags)

    @property
    def elapsed_ms(self) -> float:
        if self.start_time is None:
            return 0.0
        end_time = self.end_time or time.perf_counter()
        return (end_time - self.start_time) * 1000
