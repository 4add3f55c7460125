"""
Inbound frame classification.

Each stream has a classifier with two routing tables: ``subscriptions``
(channel name of a ``subscribe`` push) and ``methods`` (envelope method).
Each entry pairs the EventKind with a result decoder, or None for kinds that
carry no data.
"""

from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

from infrastructure.exceptions.session import UnsupportedMethodError, UnsupportedSubscriptionError
from infrastructure.logging import HFTLoggerInterface
from ..actions.base import FrameSender
from ..codec import build_request, decode_result, encode_request
from ..structs.envelope import Envelope, Event, EventKind
from ..structs.market import SubscriptionHeader

HEARTBEAT_METHOD = "public/heartbeat"
RESPOND_HEARTBEAT_METHOD = "public/respond-heartbeat"
SUBSCRIBE_METHOD = "subscribe"

Route = Tuple[EventKind, Optional[Callable[[Any], Any]]]


class StreamClassifier:
    """Turns one decoded envelope into at most one Event."""

    stream: str = ""
    heartbeat_kind: EventKind
    handshake_kind: EventKind
    subscriptions: Dict[str, Route] = {}
    methods: Dict[str, Route] = {}
    ignored_methods: FrozenSet[str] = frozenset({"unsubscribe", "ping"})

    def __init__(self, logger: HFTLoggerInterface):
        self.logger = logger

    @property
    def supported_methods(self) -> FrozenSet[str]:
        return frozenset(self.methods) | {HEARTBEAT_METHOD, SUBSCRIBE_METHOD}

    def handshake(self) -> Event:
        return Event.marker(self.handshake_kind)

    def classify(self, envelope: Envelope, output: FrameSender) -> Optional[Event]:
        """
        Classify one envelope.

        Heartbeats are answered on ``output`` before their Event is returned.

        Raises:
            UnsupportedMethodError: unknown method
            UnsupportedSubscriptionError: ``subscribe`` push for an unknown channel
            DecodeError / NumericParseError: result does not match its record
        """
        method = envelope.method

        if method == HEARTBEAT_METHOD:
            self._respond_heartbeat(envelope, output)
            return envelope.to_event(self.heartbeat_kind)

        if method in self.ignored_methods:
            return None

        if method == SUBSCRIBE_METHOD:
            return self._classify_subscription(envelope)

        route = self.methods.get(method)
        if route is None:
            raise UnsupportedMethodError(envelope)

        kind, decoder = route
        if decoder is None:
            return envelope.to_event(kind)
        if envelope.result is None:
            self._warn_missing_result(envelope)
            return None
        return envelope.to_event(kind, decoder(envelope.result))

    def _classify_subscription(self, envelope: Envelope) -> Optional[Event]:
        if envelope.result is None:
            self._warn_missing_result(envelope)
            return None

        header = decode_result(envelope.result, SubscriptionHeader)
        route = self.subscriptions.get(header.channel)
        if route is None:
            raise UnsupportedSubscriptionError(envelope, header.channel)

        kind, decoder = route
        return envelope.to_event(kind, decoder(envelope.result))

    def _respond_heartbeat(self, envelope: Envelope, output: FrameSender) -> None:
        request = build_request(envelope.id, RESPOND_HEARTBEAT_METHOD, with_nonce=False)
        output.send(encode_request(request))
        self.logger.debug("Responded to heartbeat", stream=self.stream, correlation_id=envelope.id)

    def _warn_missing_result(self, envelope: Envelope) -> None:
        self.logger.warning(
            "Response without result",
            stream=self.stream,
            method=envelope.method,
            correlation_id=envelope.id,
            code=envelope.code,
            message=envelope.message,
        )
