"""
Stream pump: owns one physical connection and its background tasks.

Two tasks run per stream:

- the actions task drains the ActionRouter and lets each Action encode its
  frame onto the stream's FrameSender
- the stream task races the socket reader (decode, classify, publish Event)
  against the socket writer (FrameSender -> socket)

Any failure in either task is fatal to the stream; there is no reconnect.
"""

import asyncio
from typing import List

from infrastructure.exceptions.session import SessionError, classify_error
from infrastructure.logging import HFTLoggerInterface
from infrastructure.networking.websocket import WebsocketClient
from utils.task_utils import cancel_tasks_with_timeout, race_tasks
from ..actions.base import FrameSender
from ..codec import decode_frame
from .action_router import ActionRouter
from .classifier import StreamClassifier


class StreamPump:

    def __init__(self, client: WebsocketClient, classifier: StreamClassifier,
                 events: asyncio.Queue, logger: HFTLoggerInterface):
        self.client = client
        self.classifier = classifier
        self.stream = classifier.stream
        self.logger = logger

        self.events = events
        self.sender = FrameSender(self.stream)
        self.router = ActionRouter(self.stream)
        self._tasks: List[asyncio.Task] = []

    @property
    def tasks(self) -> List[asyncio.Task]:
        """Stream task first, then the actions task."""
        return list(self._tasks)

    def start(self) -> List[asyncio.Task]:
        """Publish the handshake marker, then spawn the actions and stream tasks."""
        if self._tasks:
            return self.tasks

        self.events.put_nowait(self.classifier.handshake())
        self._tasks = [
            asyncio.create_task(self._run_stream(), name=f"{self.stream}-stream"),
            asyncio.create_task(self._run_actions(), name=f"{self.stream}-actions"),
        ]
        self.logger.debug("Stream pump started", stream=self.stream, url=self.client.url)
        return self.tasks

    async def _run_actions(self) -> None:
        try:
            while (record := await self.router.next()) is not None:
                record.action.process(self.sender, record.id)
                self.logger.debug("Action dispatched", stream=self.stream,
                                  correlation_id=record.id, method=record.action.method)
        except SessionError as e:
            self.logger.error("Action dispatch failed", stream=self.stream,
                              error_type=type(e).__name__, error_message=str(e))
            raise
        finally:
            self.router.mark_closed()
            self.sender.close()

    async def _run_stream(self) -> None:
        reader = asyncio.create_task(self._read(), name=f"{self.stream}-reader")
        writer = asyncio.create_task(self._write(), name=f"{self.stream}-writer")
        try:
            winner = await race_tasks([reader, writer], logger=self.logger)
            winner.result()
        finally:
            self.sender.close()
            self.router.mark_closed()

    async def _read(self) -> None:
        try:
            async for raw in self.client.messages():
                envelope = decode_frame(raw)
                event = self.classifier.classify(envelope, self.sender)
                if event is not None:
                    self.events.put_nowait(event)
        except asyncio.CancelledError:
            raise
        except SessionError as e:
            self._log_termination(e)
            raise
        except Exception as e:
            error = classify_error(e)
            self._log_termination(error)
            raise error from e

        self.logger.info("Stream ended", stream=self.stream)

    async def _write(self) -> None:
        while (frame := await self.sender.next_frame()) is not None:
            await self.client.send(frame)

    def _log_termination(self, error: SessionError) -> None:
        self.logger.error("Stream terminated", stream=self.stream,
                          error_type=type(error).__name__, error_message=str(error))

    async def close(self, timeout: float = 2.0) -> None:
        """Stop accepting actions, let the pump drain, then tear everything down."""
        self.router.close()
        if self._tasks:
            try:
                await asyncio.wait_for(asyncio.gather(*self._tasks, return_exceptions=True), timeout)
            except asyncio.TimeoutError:
                self.logger.warning("Stream pump did not drain in time", stream=self.stream, timeout=timeout)
                await cancel_tasks_with_timeout(self._tasks, timeout, self.logger)
        await self.client.close()
