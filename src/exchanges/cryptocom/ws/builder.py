"""
Session builder.

Capabilities are acquired step by step::

    builder = SessionBuilder().with_auth(api_key, secret_key)
    await builder.with_market_stream(market_url)
    await builder.with_user_stream(user_url)
    session = builder.build()

``with_auth`` is synchronous and
cannot fail; the stream steps connect immediately and start that stream's
background tasks. The stream steps may run in either order or be skipped.
"""

import asyncio
from typing import Dict, Optional

from config.structs import Credentials, SessionConfig, WebSocketConfig
from infrastructure.exceptions.session import SessionConnectionError
from infrastructure.logging import HFTLoggerInterface, get_exchange_logger
from infrastructure.networking.websocket import WebsocketClient
from .classifier import StreamClassifier
from .controller import SessionCapability, SessionController
from .market_stream import MarketStreamClassifier
from .stream_pump import StreamPump
from .user_stream import UserStreamClassifier


class SessionBuilder:

    def __init__(self, ws_config: Optional[WebSocketConfig] = None,
                 logger: Optional[HFTLoggerInterface] = None):
        self.ws_config = ws_config or WebSocketConfig()
        self.logger = logger or get_exchange_logger('cryptocom', 'session')

        self.capabilities = SessionCapability.NONE
        self.credentials: Optional[Credentials] = None
        self._events: asyncio.Queue = asyncio.Queue()
        self._pumps: Dict[str, StreamPump] = {}
        self._built = False

    def with_auth(self, api_key: str, secret_key: str) -> "SessionBuilder":
        """Store credentials and unlock credential-requiring actions."""
        self.credentials = Credentials(api_key=api_key, secret_key=secret_key)
        self.capabilities |= SessionCapability.AUTH
        self.logger.debug("Credentials configured", api_key=self.credentials.get_preview())
        return self

    async def with_market_stream(self, url: str) -> "SessionBuilder":
        """
        Connect the market stream and start its pump.

        Raises:
            SessionConnectionError: the connection could not be established
        """
        await self._add_stream(url, MarketStreamClassifier, SessionCapability.MARKET_STREAM)
        return self

    async def with_user_stream(self, url: str) -> "SessionBuilder":
        """
        Connect the user stream and start its pump.

        Credentials are not required here; the venue rejects private methods
        on an unauthenticated user stream.

        Raises:
            SessionConnectionError: the connection could not be established
        """
        await self._add_stream(url, UserStreamClassifier, SessionCapability.USER_STREAM)
        return self

    async def _add_stream(self, url: str, classifier_class, capability: SessionCapability) -> None:
        if self._built:
            raise RuntimeError("SessionBuilder.build() was already called")
        classifier_name = classifier_class.stream
        if classifier_name in self._pumps:
            raise RuntimeError(f"{classifier_name} stream is already connected")

        logger = get_exchange_logger('cryptocom', f'ws.{classifier_name}')
        client = WebsocketClient(url, self.ws_config, logger=logger)
        try:
            await client.connect()
        except SessionConnectionError:
            await self._abort()
            raise

        classifier: StreamClassifier = classifier_class(logger)
        pump = StreamPump(client, classifier, self._events, logger)
        pump.start()

        self._pumps[classifier_name] = pump
        self.capabilities |= capability
        self.logger.info("Stream connected", stream=classifier_name, url=url)

    async def _abort(self) -> None:
        for pump in self._pumps.values():
            await pump.close()
        self._pumps.clear()
        self.capabilities &= SessionCapability.AUTH

    def build(self) -> SessionController:
        if self._built:
            raise RuntimeError("SessionBuilder.build() was already called")
        self._built = True

        self.logger.info("Session built", capabilities=str(self.capabilities))
        return SessionController(
            capabilities=self.capabilities,
            pumps=dict(self._pumps),
            events=self._events,
            credentials=self.credentials,
            logger=self.logger,
        )

    @classmethod
    async def from_config(cls, config: SessionConfig,
                          logger: Optional[HFTLoggerInterface] = None) -> SessionController:
        """
        Build a session from a SessionConfig.

        Streams whose URL is None are skipped; credentials are applied only
        when both key and secret are present.
        """
        builder = cls(config.websocket, logger)
        if config.has_credentials:
            builder.with_auth(config.credentials.api_key, config.credentials.secret_key)
        if config.websocket_market_api:
            await builder.with_market_stream(config.websocket_market_api)
        if config.websocket_user_api:
            await builder.with_user_stream(config.websocket_user_api)
        return builder.build()
