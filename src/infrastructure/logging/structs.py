"""
Logging Configuration Structures

Structured configuration for the logging system using msgspec.Struct.
"""

from typing import Optional, Dict, Any, List
from msgspec import Struct

_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class BackendConfig(Struct, frozen=True):
    """
    Base configuration for all logging backends.

    Attributes:
        enabled: Whether this backend is active
        min_level: Minimum log level to process (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    enabled: bool = True
    min_level: str = "INFO"

    def validate(self) -> None:
        if self.min_level.upper() not in _VALID_LEVELS:
            raise ValueError(f"Invalid log level: {self.min_level}")


class ConsoleBackendConfig(BackendConfig):
    """
    Console backend configuration.

    Attributes:
        color: Enable colored output
        include_context: Append context key/values to each line
        max_message_length: Maximum message length before truncation
    """
    color: bool = True
    include_context: bool = True
    max_message_length: int = 1000


class FileBackendConfig(BackendConfig):
    """
    File backend configuration.

    Attributes:
        path: Log file path
        format: Output format (text or json)
        max_size_mb: Maximum file size in MB before rotation
        backup_count: Number of rotated files to keep
        buffer_size: Lines buffered before a write
        flush_interval: Flush interval in seconds
    """
    path: str = "logs/session.log"
    format: str = "text"
    max_size_mb: int = 100
    backup_count: int = 5
    buffer_size: int = 256
    flush_interval: float = 1.0

    def validate(self) -> None:
        super().validate()
        if self.format not in {"text", "json"}:
            raise ValueError(f"Invalid format: {self.format}")
        if self.max_size_mb <= 0:
            raise ValueError("max_size_mb must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count cannot be negative")


class PerformanceConfig(Struct, frozen=True):
    """
    Dispatch settings for the logger.

    Attributes:
        buffer_size: Ring buffer size for pending records
        batch_size: Records dispatched per batch
        dispatch_interval: Idle sleep of the dispatch task in seconds
    """
    buffer_size: int = 10000
    batch_size: int = 50
    dispatch_interval: float = 0.001

    def validate(self) -> None:
        if self.buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if self.dispatch_interval <= 0:
            raise ValueError("dispatch_interval must be positive")


class RouterConfig(Struct, frozen=True):
    """
    Router configuration.

    Attributes:
        routing_rules: Logger-name prefix -> backend names
        default_backends: Backends for records matching no rule
    """
    routing_rules: Optional[Dict[str, List[str]]] = None
    default_backends: Optional[List[str]] = None

    def get_default_backends(self) -> List[str]:
        if self.default_backends is not None:
            return self.default_backends
        return ["console", "file"]


class LoggingConfig(Struct, frozen=True):
    """Complete logging configuration."""
    environment: str = "dev"
    console: Optional[ConsoleBackendConfig] = None
    file: Optional[FileBackendConfig] = None
    performance: Optional[PerformanceConfig] = None
    router: Optional[RouterConfig] = None
    default_context: Optional[Dict[str, Any]] = None

    def validate(self) -> None:
        if self.environment not in {"dev", "prod", "test", "staging"}:
            raise ValueError(f"Invalid environment: {self.environment}")
        if self.console:
            self.console.validate()
        if self.file:
            self.file.validate()
        if self.performance:
            self.performance.validate()

    def get_enabled_backends(self) -> List[str]:
        enabled = []
        if self.console and self.console.enabled:
            enabled.append("console")
        if self.file and self.file.enabled:
            enabled.append("file")
        return enabled

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggingConfig":
        """Create from the ``logging:`` section of config.yaml."""
        data = dict(data)
        if isinstance(data.get("console"), dict):
            data["console"] = ConsoleBackendConfig(**data["console"])
        if isinstance(data.get("file"), dict):
            data["file"] = FileBackendConfig(**data["file"])
        if isinstance(data.get("performance"), dict):
            data["performance"] = PerformanceConfig(**data["performance"])
        if isinstance(data.get("router"), dict):
            data["router"] = RouterConfig(**data["router"])
        return cls(**data)

    @classmethod
    def default_development(cls) -> "LoggingConfig":
        return cls(
            environment="dev",
            console=ConsoleBackendConfig(enabled=True, min_level="DEBUG", color=True),
            file=FileBackendConfig(enabled=True, min_level="INFO", path="logs/dev.log"),
            performance=PerformanceConfig(),
            router=RouterConfig(default_backends=["console", "file"])
        )

    @classmethod
    def default_production(cls) -> "LoggingConfig":
        return cls(
            environment="prod",
            console=ConsoleBackendConfig(enabled=False),
            file=FileBackendConfig(
                enabled=True,
                min_level="INFO",
                path="logs/production.log",
                format="json",
                max_size_mb=500,
                backup_count=10
            ),
            performance=PerformanceConfig(buffer_size=50000, batch_size=100),
            router=RouterConfig(default_backends=["file"])
        )

    @classmethod
    def default_test(cls) -> "LoggingConfig":
        return cls(
            environment="test",
            console=ConsoleBackendConfig(enabled=True, min_level="WARNING", color=False),
            performance=PerformanceConfig(buffer_size=100, batch_size=1),
            router=RouterConfig(default_backends=["console"])
        )
