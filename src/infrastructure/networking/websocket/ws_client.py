from typing import AsyncIterator, Optional, Union

from websockets import connect
from websockets.exceptions import ConnectionClosed, ConnectionClosedError

from config.structs import WebSocketConfig
from infrastructure.exceptions.session import SendError, SessionConnectionError, UnclassifiedError
from infrastructure.logging import HFTLoggerInterface, get_logger
from infrastructure.networking.websocket.structs import ConnectionState
from utils.task_utils import safe_close_connection


class WebsocketClient:
    """
    One physical WebSocket connection.

    Data format agnostic: sends text frames and yields raw inbound frames
    (``str`` or ``bytes``). There is no reconnection; a dropped connection
    ends ``messages()`` and the owner decides what that means. Protocol-level
    ping/pong is handled by the websockets library.
    """

    __slots__ = ('url', 'config', 'logger', '_state', '_ws')

    def __init__(self, url: str, config: Optional[WebSocketConfig] = None,
                 logger: Optional[HFTLoggerInterface] = None):
        self.url = url
        self.config = config or WebSocketConfig()
        self.logger = logger or get_logger('ws.client')
        self._state = ConnectionState.DISCONNECTED
        self._ws = None

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state == ConnectionState.CONNECTED and self._ws is not None

    async def connect(self) -> None:
        """
        Open the connection.

        Raises:
            SessionConnectionError: the opening handshake failed or timed out
        """
        self._state = ConnectionState.CONNECTING
        self.logger.debug("Connecting to WebSocket", url=self.url)

        try:
            self._ws = await connect(
                self.url,
                open_timeout=self.config.connect_timeout,
                ping_interval=self.config.ping_interval,
                ping_timeout=self.config.ping_timeout,
                close_timeout=self.config.close_timeout,
                max_queue=self.config.max_queue_size,
                max_size=self.config.max_message_size,
                compression="deflate" if self.config.enable_compression else None,
            )
        except Exception as e:
            self._state = ConnectionState.ERROR
            self.logger.error("Failed to connect to WebSocket", url=self.url, error_type=type(e).__name__,
                              error_message=str(e))
            raise SessionConnectionError(self.url, str(e) or type(e).__name__) from e

        self._state = ConnectionState.CONNECTED
        self.logger.info("WebSocket connected", url=self.url)

    async def send(self, message: Union[str, bytes]) -> None:
        if not self.is_connected:
            raise SendError(f"WebSocket to {self.url} is not connected")
        try:
            await self._ws.send(message)
        except ConnectionClosed as e:
            self._state = ConnectionState.CLOSED
            raise SendError(f"WebSocket to {self.url} closed: {e}") from e

    async def messages(self) -> AsyncIterator[Union[str, bytes]]:
        """
        Yield inbound frames in arrival order.

        Ends quietly on a normal close; an abnormal close raises UnclassifiedError.
        """
        if not self.is_connected:
            raise UnclassifiedError(f"WebSocket to {self.url} is not connected")
        try:
            async for raw in self._ws:
                yield raw
        except ConnectionClosedError as e:
            self._state = ConnectionState.ERROR
            raise UnclassifiedError(f"WebSocket to {self.url} closed abnormally: {e}") from e
        self._state = ConnectionState.CLOSED
        self.logger.info("WebSocket closed by peer", url=self.url)

    async def close(self) -> None:
        if self._ws is None or self._state == ConnectionState.CLOSED:
            self._state = ConnectionState.CLOSED
            return
        self._state = ConnectionState.CLOSING
        await safe_close_connection(self._ws, timeout=self.config.close_timeout, logger=self.logger)
        self._state = ConnectionState.CLOSED
        self.logger.debug("WebSocket closed", url=self.url)

    async def __aenter__(self) -> "WebsocketClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
