from .structs import ConnectionState
from .ws_client import WebsocketClient

__all__ = [
    "ConnectionState",
    "WebsocketClient",
]
