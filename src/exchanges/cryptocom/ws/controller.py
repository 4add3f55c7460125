"""
Session controller: the object application code holds.

Owns the correlation id counter, the stream pumps for whichever streams were
established, and the single receiving end of the event channel. Capabilities
are checked at submission; see SessionCapability.
"""

import asyncio
import inspect
from enum import Flag, auto
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from config.structs import Credentials
from infrastructure.exceptions.session import MissingConfigurationError
from infrastructure.logging import HFTLoggerInterface, get_exchange_logger
from utils.task_utils import race_tasks
from ..actions.base import Action
from ..actions.market import Auth
from ..structs.envelope import Event
from .action_router import CorrelationCounter
from .stream_pump import StreamPump

EventHandler = Callable[[Event], Union[bool, None, Awaitable[Optional[bool]]]]


class SessionCapability(Flag):
    NONE = 0
    AUTH = auto()
    MARKET_STREAM = auto()
    USER_STREAM = auto()


class EventReceiver:
    """Single-owner receiving end of the event channel."""

    __slots__ = ('_queue',)

    def __init__(self, queue: asyncio.Queue):
        self._queue = queue

    async def recv(self) -> Event:
        return await self._queue.get()


class SessionController:
    """
    Multiplexed venue session over up to two streams.

    Both streams share one correlation id counter, so ids are strictly
    increasing across the whole session. Events from both streams arrive on
    one channel, drained by exactly one ``listen`` loop.
    """

    def __init__(self, capabilities: SessionCapability,
                 pumps: Dict[str, StreamPump],
                 events: asyncio.Queue,
                 credentials: Optional[Credentials] = None,
                 logger: Optional[HFTLoggerInterface] = None):
        self.capabilities = capabilities
        self.credentials = credentials
        self.logger = logger or get_exchange_logger('cryptocom', 'session')

        self._pumps = pumps
        self._counter = CorrelationCounter()
        self._receiver: Optional[EventReceiver] = EventReceiver(events)
        self._closed = False

    @property
    def current_id(self) -> int:
        """Correlation id the next successful submission will receive."""
        return self._counter.current

    @property
    def has_auth(self) -> bool:
        return SessionCapability.AUTH in self.capabilities

    @property
    def background_tasks(self) -> List[asyncio.Task]:
        return [task for pump in self._pumps.values() for task in pump.tasks]

    async def submit_market_action(self, action: Action) -> int:
        """
        Queue an action on the market stream.

        Returns:
            The correlation id the venue will echo back in the response.

        Raises:
            MissingConfigurationError: no market stream, or the action needs credentials the session lacks
            SendError: the market stream is already shut down
        """
        return await self._submit(SessionCapability.MARKET_STREAM, "market", "websocket_market_api", action)

    async def submit_user_action(self, action: Action) -> int:
        """Queue an action on the user stream. Same contract as ``submit_market_action``."""
        return await self._submit(SessionCapability.USER_STREAM, "user", "websocket_user_api", action)

    async def _submit(self, capability: SessionCapability, stream: str, setting: str, action: Action) -> int:
        if capability not in self.capabilities:
            raise MissingConfigurationError(setting)
        if action.requires_auth and not self.has_auth:
            raise MissingConfigurationError("api_key")

        return await self._counter.submit(self._pumps[stream].router, action)

    async def authenticate(self) -> int:
        """Send ``public/auth`` on the user stream with the session's credentials."""
        if not self.has_auth or self.credentials is None:
            raise MissingConfigurationError("api_key")
        return await self.submit_user_action(Auth.from_credentials(self.credentials))

    def listen(self, handler: EventHandler) -> "asyncio.Task[Any]":
        """
        Start the listen loop.

        ``handler`` is called with every Event in arrival order and may be a
        plain function or a coroutine function. Returning True ends the loop.
        The loop is raced against every background task: whichever finishes
        first decides the outcome, so a fatal stream error surfaces as the
        exception of the returned task.

        Raises:
            MissingConfigurationError: the event receiver was already taken by an earlier ``listen``
        """
        receiver = self._receiver
        if receiver is None:
            raise MissingConfigurationError("event_receiver")
        self._receiver = None

        return asyncio.create_task(self._listen(receiver, handler), name="session-listen")

    async def _listen(self, receiver: EventReceiver, handler: EventHandler) -> Any:
        loop_task = asyncio.create_task(self._handle_events(receiver, handler), name="session-events")
        winner = await race_tasks([loop_task, *self.background_tasks], logger=self.logger)

        if winner.cancelled():
            return None
        if winner is not loop_task and winner.exception() is None:
            self.logger.info("Background task finished, listen loop stopped", task=winner.get_name())
        return winner.result()

    async def _handle_events(self, receiver: EventReceiver, handler: EventHandler) -> None:
        while True:
            event = await receiver.recv()
            should_stop = handler(event)
            if inspect.isawaitable(should_stop):
                should_stop = await should_stop
            if should_stop:
                self.logger.debug("Listen loop stopped by handler", kind=event.kind.value)
                return None

    async def close(self) -> None:
        """Close both action queues, let the pumps drain, and close the connections."""
        if self._closed:
            return
        self._closed = True

        for name, pump in self._pumps.items():
            await pump.close()
            self.logger.info("Stream closed", stream=name)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
