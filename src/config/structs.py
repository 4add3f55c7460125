from typing import Optional

from msgspec import Struct, field

SANDBOX_MARKET_URL = "wss://uat-stream.3ona.co/v2/market"
SANDBOX_USER_URL = "wss://uat-stream.3ona.co/v2/user"
SANDBOX_REST_URL = "https://uat-api.3ona.co/v2/"


class Credentials(Struct, frozen=True):
    """
    API credentials for signed requests.

    Attributes:
        api_key: Public API key
        secret_key: Secret used for HMAC-SHA256 signatures
    """
    api_key: str = ""
    secret_key: str = ""

    @property
    def has_private_api(self) -> bool:
        return bool(self.api_key) and bool(self.secret_key)

    def get_preview(self) -> str:
        """Masked key for logs, never the secret."""
        if not self.api_key:
            return "none"
        if len(self.api_key) <= 8:
            return "***"
        return f"{self.api_key[:4]}...{self.api_key[-4:]}"


class NetworkConfig(Struct, frozen=True):
    """
    HTTP settings for the REST client.

    Attributes:
        request_timeout: Total request timeout in seconds
        connect_timeout: Connection timeout in seconds
    """
    request_timeout: float = 10.0
    connect_timeout: float = 5.0

    def validate(self) -> None:
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")


class WebSocketConfig(Struct, frozen=True):
    """
    Stream connection settings.

    Attributes:
        connect_timeout: Opening handshake timeout in seconds
        ping_interval: Protocol-level ping interval in seconds (None disables)
        ping_timeout: Protocol-level pong timeout in seconds (None disables)
        close_timeout: Closing handshake timeout in seconds
        max_message_size: Maximum inbound message size in bytes
        max_queue_size: Inbound frames buffered by the transport
        enable_compression: Negotiate permessage-deflate
    """
    connect_timeout: float = 10.0
    ping_interval: Optional[float] = 20.0
    ping_timeout: Optional[float] = 20.0
    close_timeout: float = 5.0
    max_message_size: int = 1048576  # 1MB
    max_queue_size: int = 1000
    enable_compression: bool = False

    def validate(self) -> None:
        if self.connect_timeout <= 0:
            raise ValueError("connect_timeout must be positive")
        if self.close_timeout <= 0:
            raise ValueError("close_timeout must be positive")
        if self.max_message_size <= 0:
            raise ValueError("max_message_size must be positive")


class SessionConfig(Struct, frozen=True):
    """
    Everything a session needs to connect.

    Attributes:
        credentials: API credentials, None for a public-only session
        websocket_market_api: Market stream URL, None to skip the market stream
        websocket_user_api: User stream URL, None to skip the user stream
        rest_url: REST base URL ending with '/'
        websocket: Stream connection settings
        network: REST connection settings
    """
    credentials: Optional[Credentials] = None
    websocket_market_api: Optional[str] = None
    websocket_user_api: Optional[str] = None
    rest_url: Optional[str] = None
    websocket: WebSocketConfig = field(default_factory=WebSocketConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)

    @property
    def has_credentials(self) -> bool:
        return self.credentials is not None and self.credentials.has_private_api

    def validate(self) -> None:
        for name in ("websocket_market_api", "websocket_user_api"):
            url = getattr(self, name)
            if url is not None and not url.startswith(("ws://", "wss://")):
                raise ValueError(f"{name} must start with ws:// or wss://")
        if self.rest_url is not None and not self.rest_url.startswith(("http://", "https://")):
            raise ValueError("rest_url must start with http:// or https://")
        self.websocket.validate()
        self.network.validate()

    @classmethod
    def sandbox(cls, credentials: Optional[Credentials] = None) -> "SessionConfig":
        return cls(
            credentials=credentials,
            websocket_market_api=SANDBOX_MARKET_URL,
            websocket_user_api=SANDBOX_USER_URL,
            rest_url=SANDBOX_REST_URL,
        )
