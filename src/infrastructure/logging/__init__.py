"""
Logging System

Non-blocking logging for the session client. Configured from the ``logging:``
section of config.yaml, or from the ENVIRONMENT default.

Usage:
    from infrastructure.logging import get_logger

    logger = get_logger('my.component')
    logger.info("Component initialized")

    logger = get_exchange_logger('cryptocom', 'ws.user')
    logger.debug("frame sent", correlation_id=7, stream="user")

    logger.metric("frames_received", 1, stream="market")
"""

from .interfaces import (
    LogLevel,
    LogType,
    LogRecord,
    LogBackend,
    LogRouter,
    HFTLoggerInterface
)

from .hft_logger import HFTLogger, LoggingTimer

from .factory import (
    LoggerFactory,
    get_logger,
    get_exchange_logger,
    configure_logging,
)

from .structs import (
    LoggingConfig,
    BackendConfig,
    ConsoleBackendConfig,
    FileBackendConfig,
    PerformanceConfig,
    RouterConfig,
)

from .router import SimpleRouter, create_router

from .backends import ConsoleBackend, ColorConsoleBackend, FileBackend

__all__ = [
    'LogLevel',
    'LogType',
    'LogRecord',
    'LogBackend',
    'LogRouter',
    'HFTLoggerInterface',

    'HFTLogger',
    'LoggingTimer',

    'LoggerFactory',
    'get_logger',
    'get_exchange_logger',
    'configure_logging',

    'LoggingConfig',
    'BackendConfig',
    'ConsoleBackendConfig',
    'FileBackendConfig',
    'PerformanceConfig',
    'RouterConfig',

    'SimpleRouter',
    'create_router',

    'ConsoleBackend',
    'ColorConsoleBackend',
    'FileBackend',
]
