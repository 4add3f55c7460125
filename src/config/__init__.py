from .structs import (
    Credentials,
    NetworkConfig,
    WebSocketConfig,
    SessionConfig,
    SANDBOX_MARKET_URL,
    SANDBOX_USER_URL,
    SANDBOX_REST_URL,
)
from .config_manager import (
    SessionConfigManager,
    guess_file_paths,
    get_config,
    get_session_config,
    get_logging_config,
)

__all__ = [
    'Credentials',
    'NetworkConfig',
    'WebSocketConfig',
    'SessionConfig',
    'SANDBOX_MARKET_URL',
    'SANDBOX_USER_URL',
    'SANDBOX_REST_URL',
    'SessionConfigManager',
    'guess_file_paths',
    'get_config',
    'get_session_config',
    'get_logging_config',
]
