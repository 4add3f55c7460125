"""
Outbound actions.

An Action is one command the application wants on the wire. Given the
stream's FrameSender and the correlation id assigned at submission,
``process`` encodes and hands exactly one frame to the sender, or raises.
"""

import asyncio
from typing import Any, ClassVar, Optional

import msgspec

from infrastructure.exceptions.session import SendError
from ..codec import build_request, encode_request

_CLOSE = object()


class FrameSender:
    """
    Write half of a stream's outbound frame channel.

    ``send`` never blocks; frames are written to the socket by the stream's
    writer task in the order they were sent. After ``close`` the writer drains
    what is queued and exits, and further sends raise SendError.
    """

    __slots__ = ('stream', '_queue', '_closed')

    def __init__(self, stream: str):
        self.stream = stream
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, frame: str) -> None:
        if self._closed:
            raise SendError(f"{self.stream} stream output is closed")
        self._queue.put_nowait(frame)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(_CLOSE)

    async def next_frame(self) -> Optional[str]:
        """Next queued frame, or None once the sender is closed and drained."""
        frame = await self._queue.get()
        if frame is _CLOSE:
            return None
        return frame


class Action(msgspec.Struct, frozen=True, omit_defaults=True):
    """
    Base for every outbound command.

    Struct fields become the request ``params``; fields left at None are
    omitted. Subclasses set ``method`` and whether credentials are required.
    """
    method: ClassVar[str] = ""
    requires_auth: ClassVar[bool] = False

    def params(self) -> Optional[dict]:
        params = msgspec.to_builtins(self)
        return params or None

    def process(self, output: FrameSender, id: int) -> None:
        output.send(encode_request(build_request(id, self.method, self.params())))


class ActionRecord(msgspec.Struct, frozen=True):
    """An action with its correlation id, as queued to a stream."""
    id: int
    action: Any
