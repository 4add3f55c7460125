"""
Logging Factory

Creates and caches logger instances from struct-based configuration.
Components take a logger once at construction and keep it as ``self.logger``.
"""

import os
from typing import Dict, Optional

from .interfaces import HFTLoggerInterface, LogLevel
from .hft_logger import HFTLogger
from .router import create_router
from .backends.console import ConsoleBackend, ColorConsoleBackend
from .backends.file import FileBackend
from .structs import LoggingConfig, PerformanceConfig, RouterConfig


class LoggerFactory:
    """Logging factory - trust config, fail fast."""

    _cached_loggers: Dict[str, HFTLoggerInterface] = {}
    _default_config: Optional[LoggingConfig] = None

    @classmethod
    def create_logger(cls, name: str, config: Optional[LoggingConfig] = None) -> HFTLoggerInterface:
        if name in cls._cached_loggers:
            return cls._cached_loggers[name]

        config = config or cls._get_default_config()

        backends = []
        if config.console and config.console.enabled:
            backend_class = ColorConsoleBackend if config.console.color else ConsoleBackend
            backends.append(backend_class(config.console, 'console'))

        if config.file and config.file.enabled:
            backends.append(FileBackend(config.file, 'file'))

        router = create_router({b.name: b for b in backends}, config.router or RouterConfig())

        logger = HFTLogger(
            name=name,
            backends=backends,
            router=router,
            config=config.performance or PerformanceConfig(),
            default_context=config.default_context,
        )

        cls._cached_loggers[name] = logger
        return logger

    @classmethod
    def get_default_config(cls) -> LoggingConfig:
        return cls._get_default_config()

    @classmethod
    def override_logger(cls, name: str, **overrides) -> bool:
        """
        Override a cached logger at runtime.

        Args:
            name: Logger name
            **overrides:
                - min_level: new minimum level for every backend ("ERROR", ...)
                - enabled: enable/disable all backends of the logger

        Returns:
            True if the logger was found and modified
        """
        logger = cls._cached_loggers.get(name)
        if logger is None:
            return False

        if "min_level" in overrides:
            level = overrides["min_level"]
            if isinstance(level, str):
                level = LogLevel[level.upper()]
            for backend in logger.backends:
                backend.min_level = level

        if "enabled" in overrides:
            for backend in logger.backends:
                backend.enabled = overrides["enabled"]

        return True

    @classmethod
    def clear_cache(cls) -> None:
        cls._cached_loggers.clear()
        cls._default_config = None

    @classmethod
    def _get_default_config(cls) -> LoggingConfig:
        if cls._default_config is None:
            cls._default_config = cls._load_default_config()
        return cls._default_config

    @classmethod
    def _load_default_config(cls) -> LoggingConfig:
        """``logging:`` section of config.yaml when present, else the environment default."""
        # Delayed import, config imports logging structs
        from config import get_logging_config

        configured = get_logging_config()
        if configured is not None:
            return configured

        environment = os.getenv('ENVIRONMENT', 'dev').lower()
        if environment == 'prod':
            return LoggingConfig.default_production()
        if environment == 'test':
            return LoggingConfig.default_test()
        return LoggingConfig.default_development()


def get_logger(name: str) -> HFTLoggerInterface:
    return LoggerFactory.create_logger(name)


def get_exchange_logger(exchange: str, component: str = None) -> HFTLoggerInterface:
    """Get exchange logger with optional component, e.g. ``cryptocom.ws.market``."""
    name = f"{exchange}.{component}" if component else exchange
    return get_logger(name)


def configure_logging(config: LoggingConfig) -> None:
    """Replace the default configuration; already created loggers are dropped."""
    config.validate()
    LoggerFactory.clear_cache()
    LoggerFactory._default_config = config
