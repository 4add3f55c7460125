import asyncio
from typing import Optional

from infrastructure.exceptions.session import SendError
from ..actions.base import Action, ActionRecord

_CLOSE = object()


class ActionRouter:
    """
    Unbounded FIFO of ActionRecords feeding one stream's outbound pump.

    ``push`` fails with SendError once the router is closed, either by
    session shutdown (``close``) or because the stream died (``mark_closed``).
    After ``close`` the pump still drains every record queued before it;
    after ``mark_closed`` queued records are discarded.
    """

    __slots__ = ('stream', '_queue', '_closed')

    def __init__(self, stream: str):
        self.stream = stream
        self._queue: asyncio.Queue = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, record: ActionRecord) -> None:
        if self._closed:
            raise SendError(f"{self.stream} action queue is closed")
        self._queue.put_nowait(record)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(_CLOSE)

    def mark_closed(self) -> None:
        """Stream is gone: refuse new actions, drop queued ones and wake the pump."""
        self._closed = True
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(_CLOSE)

    async def next(self) -> Optional[ActionRecord]:
        """Next record, or None after ``close`` once everything before it was drained."""
        record = await self._queue.get()
        if record is _CLOSE:
            return None
        return record


class CorrelationCounter:
    """
    Session-wide correlation id counter shared by both streams.

    The id is taken and the record pushed under one lock; the counter only
    advances after the push succeeded, so a rejected submission does not
    consume an id.
    """

    __slots__ = ('_next_id', '_lock')

    def __init__(self, start: int = 0):
        self._next_id = start
        self._lock = asyncio.Lock()

    @property
    def current(self) -> int:
        """Id the next successful submission will receive."""
        return self._next_id

    async def submit(self, router: ActionRouter, action: Action) -> int:
        async with self._lock:
            id = self._next_id
            router.push(ActionRecord(id=id, action=action))
            self._next_id = id + 1
            return id
