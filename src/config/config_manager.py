"""
Session Configuration Management

YAML-based configuration for the venue session client.

Key Features:
- ``.env`` loading with python-dotenv (never overrides the real environment)
- ``config.yaml`` with ``${VAR}`` / ``${VAR:default}`` substitution
- Typed access through msgspec structs
- Clear errors for malformed settings

Usage:
    from config import get_config

    session_config = get_config().get_session_config()   # SessionConfig
    logging_config = get_config().get_logging_config()   # LoggingConfig or None
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import msgspec
import yaml
from dotenv import load_dotenv

from infrastructure.exceptions.system import ConfigurationError
from infrastructure.logging.structs import LoggingConfig
from .structs import Credentials, NetworkConfig, SessionConfig, WebSocketConfig

_ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')


def guess_file_paths(file_name: str) -> List[Path]:
    """
    Returns a list of possible file locations to search.
    """
    return [
        Path(__file__).parent.parent.parent / file_name,  # Project root
        Path(__file__).parent.parent / file_name,         # src directory
        Path.cwd() / file_name,                           # Current working directory
    ]


class SessionConfigManager:
    """Loads and holds the raw configuration, hands out typed structs."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None, load_env: bool = True):
        self._logger = logging.getLogger(__name__)
        self._config_data: Dict[str, Any] = {}
        self.config_path: Optional[Path] = None

        if load_env:
            self._load_env_file()
        self._load_yaml_config(Path(config_path) if config_path else None)

        self.ENVIRONMENT = str(self._config_data.get('environment', os.getenv('ENVIRONMENT', 'dev'))).lower()

    def _load_env_file(self) -> None:
        for env_path in guess_file_paths('.env'):
            if env_path.exists():
                load_dotenv(dotenv_path=env_path, override=False)
                self._logger.info(f"Loaded environment variables from: {env_path}")
                return
        self._logger.debug("No .env file found - using system environment variables only")

    def _load_yaml_config(self, config_path: Optional[Path]) -> None:
        """Load config.yaml; an explicit path must exist, the guessed ones are optional."""
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}", 'config_path')
            candidates = [config_path]
        else:
            candidates = [path for path in guess_file_paths('config.yaml') if path.exists()]

        if not candidates:
            self._logger.debug("No config.yaml found - using defaults and environment")
            return

        path = candidates[0]
        raw_content = path.read_text(encoding='utf-8')
        try:
            config_data = yaml.safe_load(self._substitute_env_vars(raw_content)) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}", 'config_path') from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Top level of {path} must be a mapping", 'config_path')

        self._config_data = config_data
        self.config_path = path
        self._logger.info(f"Configuration loaded from: {path}")

    def _substitute_env_vars(self, content: str) -> str:
        """
        Substitute environment variables in configuration content.

        Supports syntax:
        - ${VAR_NAME} - Required environment variable (empty when unset)
        - ${VAR_NAME:default} - Optional with default value
        """
        def replace_var(match):
            var_expr = match.group(1)

            if ':' in var_expr:
                var_name, default_value = var_expr.split(':', 1)
                env_value = os.getenv(var_name.strip())
                if env_value is None:
                    return default_value
                return env_value

            var_name = var_expr.strip()
            env_value = os.getenv(var_name)
            if env_value is None:
                self._logger.warning(f"Environment variable {var_name} not set - using empty value")
                return ""
            return env_value

        return _ENV_VAR_PATTERN.sub(replace_var, content)

    @property
    def config_data(self) -> Dict[str, Any]:
        return self._config_data

    def get_session_config(self) -> SessionConfig:
        """
        Build the SessionConfig from the ``session:``, ``websocket:`` and ``network:`` sections.

        Empty URLs and empty credentials count as not configured.
        """
        session_data = self._config_data.get('session') or {}

        credentials = None
        credentials_data = session_data.get('credentials') or {}
        api_key = credentials_data.get('api_key') or ''
        secret_key = credentials_data.get('secret_key') or ''
        if api_key or secret_key:
            credentials = Credentials(api_key=str(api_key), secret_key=str(secret_key))

        try:
            websocket = msgspec.convert(self._config_data.get('websocket') or {}, WebSocketConfig, strict=False)
            network = msgspec.convert(self._config_data.get('network') or {}, NetworkConfig, strict=False)
        except msgspec.ValidationError as e:
            raise ConfigurationError(f"Invalid stream/network settings: {e}") from e

        config = SessionConfig(
            credentials=credentials,
            websocket_market_api=session_data.get('websocket_market_api') or None,
            websocket_user_api=session_data.get('websocket_user_api') or None,
            rest_url=session_data.get('rest_url') or None,
            websocket=websocket,
            network=network,
        )

        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(str(e), 'session') from e
        return config

    def get_logging_config(self) -> Optional[LoggingConfig]:
        logging_data = self._config_data.get('logging')
        if not logging_data:
            return None

        data = dict(logging_data)
        data.setdefault('environment', self.ENVIRONMENT)
        try:
            config = LoggingConfig.from_dict(data)
            config.validate()
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid logging settings: {e}", 'logging') from e
        return config


_config_manager: Optional[SessionConfigManager] = None


def get_config() -> SessionConfigManager:
    """Process-wide configuration manager, loaded on first use."""
    global _config_manager
    if _config_manager is None:
        _config_manager = SessionConfigManager()
    return _config_manager


def get_session_config() -> SessionConfig:
    return get_config().get_session_config()


def get_logging_config() -> Optional[LoggingConfig]:
    return get_config().get_logging_config()
