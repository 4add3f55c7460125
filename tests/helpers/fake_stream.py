"""
In-memory stand-in for WebsocketClient used by the pump and controller tests.
"""

import asyncio
import json
from typing import Any, List, Union

_END = object()


class FakeStreamClient:

    def __init__(self, url: str = "wss://fake.local/v2/market"):
        self.url = url
        self.sent: List[str] = []
        self.closed = False
        self._inbound: asyncio.Queue = asyncio.Queue()
        self._sent_event = asyncio.Event()

    def feed(self, frame: Union[dict, str, bytes]) -> None:
        if isinstance(frame, dict):
            frame = json.dumps(frame)
        self._inbound.put_nowait(frame)

    def finish(self) -> None:
        """End ``messages()`` like a clean close by the peer."""
        self._inbound.put_nowait(_END)

    def fail(self, error: BaseException) -> None:
        self._inbound.put_nowait(error)

    async def messages(self):
        while True:
            item = await self._inbound.get()
            if item is _END:
                return
            if isinstance(item, BaseException):
                raise item
            yield item

    async def send(self, frame: str) -> None:
        self.sent.append(frame)
        self._sent_event.set()

    async def close(self) -> None:
        self.closed = True

    def sent_json(self) -> List[Any]:
        return [json.loads(frame) for frame in self.sent]

    async def wait_sent(self, count: int, timeout: float = 1.0) -> List[Any]:
        async def _wait():
            while len(self.sent) < count:
                self._sent_event.clear()
                await self._sent_event.wait()

        await asyncio.wait_for(_wait(), timeout)
        return self.sent_json()
