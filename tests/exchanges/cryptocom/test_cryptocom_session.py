"""
Session controller and stream pump behaviour over in-memory streams.
"""

import asyncio
from unittest.mock import Mock

import pytest

from config.structs import Credentials
from exchanges.cryptocom.actions import (
    Auth,
    CancelOrder,
    CreateOrder,
    GetInstruments,
    Subscribe,
    Unsubscribe,
)
from exchanges.cryptocom.structs import EventKind
from exchanges.cryptocom.ws import (
    MarketStreamClassifier,
    SessionCapability,
    SessionController,
    StreamPump,
    UserStreamClassifier,
)
from infrastructure.exceptions.session import (
    DecodeError,
    MissingConfigurationError,
    SendError,
    UnclassifiedError,
    UnsupportedMethodError,
)
from tests.helpers.cryptocom_samples import TICKER_RESULT
from tests.helpers.fake_stream import FakeStreamClient


class SessionFixture:
    """Controller wired to fake clients, with direct access to both sides."""

    def __init__(self, market: bool = True, user: bool = True, credentials: Credentials = None):
        self.logger = Mock()
        self.events = asyncio.Queue()
        self.clients = {}
        pumps = {}
        capabilities = SessionCapability.NONE

        if credentials is not None:
            capabilities |= SessionCapability.AUTH
        if market:
            pumps["market"] = self._pump("market", MarketStreamClassifier)
            capabilities |= SessionCapability.MARKET_STREAM
        if user:
            pumps["user"] = self._pump("user", UserStreamClassifier)
            capabilities |= SessionCapability.USER_STREAM

        self.pumps = pumps
        self.controller = SessionController(capabilities, pumps, self.events, credentials, self.logger)

    def _pump(self, stream, classifier_class):
        client = FakeStreamClient(f"wss://fake.local/v2/{stream}")
        self.clients[stream] = client
        pump = StreamPump(client, classifier_class(self.logger), self.events, self.logger)
        pump.start()
        return pump


@pytest.fixture
def credentials():
    return Credentials(api_key="key", secret_key="secret")


class TestCorrelationIds:

    @pytest.mark.asyncio
    async def test_ids_strictly_increase_across_streams(self, credentials):
        session = SessionFixture(credentials=credentials)
        controller = session.controller

        ids = [
            await controller.submit_market_action(Subscribe(channels=["ticker.BTC_USDT"])),
            await controller.submit_user_action(GetInstruments()),
            await controller.submit_market_action(Unsubscribe(channels=["ticker.BTC_USDT"])),
            await controller.submit_user_action(CancelOrder(instrument_name="BTC_USDT", order_id="1")),
        ]

        assert ids == [0, 1, 2, 3]
        assert controller.current_id == 4

        market = await session.clients["market"].wait_sent(2)
        user = await session.clients["user"].wait_sent(2)
        assert [frame["id"] for frame in market] == [0, 2]
        assert [frame["id"] for frame in user] == [1, 3]
        await controller.close()

    @pytest.mark.asyncio
    async def test_failed_submission_does_not_consume_id(self):
        session = SessionFixture()
        controller = session.controller

        assert await controller.submit_market_action(GetInstruments()) == 0
        session.pumps["user"].router.mark_closed()

        with pytest.raises(SendError):
            await controller.submit_user_action(GetInstruments())

        assert await controller.submit_market_action(GetInstruments()) == 1
        await controller.close()

    @pytest.mark.asyncio
    async def test_concurrent_submissions_get_unique_ids(self):
        session = SessionFixture()
        controller = session.controller

        ids = await asyncio.gather(*(
            controller.submit_market_action(Subscribe(channels=[f"ticker.X{i}_USDT"])) for i in range(20)
        ))

        assert sorted(ids) == list(range(20))
        await controller.close()

    @pytest.mark.asyncio
    async def test_outbound_fifo(self):
        session = SessionFixture(user=False)
        controller = session.controller

        for channel in ("a", "b", "c"):
            await controller.submit_market_action(Subscribe(channels=[channel]))

        frames = await session.clients["market"].wait_sent(3)
        assert [frame["params"]["channels"] for frame in frames] == [["a"], ["b"], ["c"]]
        assert [frame["id"] for frame in frames] == [0, 1, 2]
        await controller.close()


class TestCapabilityGating:

    @pytest.mark.asyncio
    async def test_missing_user_stream(self):
        session = SessionFixture(user=False)

        with pytest.raises(MissingConfigurationError) as exc_info:
            await session.controller.submit_user_action(GetInstruments())

        assert exc_info.value.field == "websocket_user_api"
        assert session.controller.current_id == 0
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_missing_market_stream(self):
        session = SessionFixture(market=False)

        with pytest.raises(MissingConfigurationError) as exc_info:
            await session.controller.submit_market_action(Subscribe(channels=["ticker.BTC_USDT"]))

        assert exc_info.value.field == "websocket_market_api"
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_private_action_requires_auth(self):
        session = SessionFixture()
        action = CreateOrder(instrument_name="BTC_USDT", side="BUY", order_type="MARKET", quantity=1.0)

        with pytest.raises(MissingConfigurationError) as exc_info:
            await session.controller.submit_user_action(action)

        assert exc_info.value.field == "api_key"
        assert session.controller.current_id == 0
        assert session.clients["user"].sent == []
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_unauthenticated_user_stream_accepts_public_actions(self):
        session = SessionFixture(market=False)

        assert await session.controller.submit_user_action(GetInstruments()) == 0
        assert await session.controller.submit_user_action(Auth(api_key="k", secret_key="s")) == 1
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_authenticate_uses_session_credentials(self, credentials):
        session = SessionFixture(market=False, credentials=credentials)

        assert await session.controller.authenticate() == 0

        frame = (await session.clients["user"].wait_sent(1))[0]
        assert frame["method"] == "public/auth"
        assert frame["api_key"] == "key"
        assert "sig" in frame
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_authenticate_without_credentials(self):
        session = SessionFixture()

        with pytest.raises(MissingConfigurationError):
            await session.controller.authenticate()
        await session.controller.close()


class TestListen:

    @pytest.mark.asyncio
    async def test_handshakes_arrive_first(self):
        session = SessionFixture()
        received = []

        def handler(event):
            received.append(event.kind)
            return len(received) == 2

        assert await session.controller.listen(handler) is None
        assert received == [EventKind.MARKET_HANDSHAKE, EventKind.USER_HANDSHAKE]
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_heartbeat_answered_and_delivered(self):
        session = SessionFixture(user=False)
        received = []

        async def handler(event):
            received.append(event)
            return event.kind is EventKind.MARKET_HEARTBEAT

        task = session.controller.listen(handler)
        session.clients["market"].feed({"id": 7, "method": "public/heartbeat"})

        assert await asyncio.wait_for(task, 1.0) is None
        assert [event.kind for event in received] == [EventKind.MARKET_HANDSHAKE, EventKind.MARKET_HEARTBEAT]
        assert received[-1].id == 7
        assert session.clients["market"].sent_json() == [{"id": 7, "method": "public/respond-heartbeat"}]
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_events_delivered_in_arrival_order(self):
        session = SessionFixture(user=False)
        received = []

        def handler(event):
            if event.kind is EventKind.TICKER:
                received.append(event.id)
            return len(received) == 3

        task = session.controller.listen(handler)
        for id in (10, 11, 12):
            session.clients["market"].feed({"id": id, "method": "subscribe", "code": 0, "result": TICKER_RESULT})

        await asyncio.wait_for(task, 1.0)
        assert received == [10, 11, 12]
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_second_listen_is_rejected(self):
        session = SessionFixture()
        task = session.controller.listen(lambda event: True)

        with pytest.raises(MissingConfigurationError) as exc_info:
            session.controller.listen(lambda event: True)

        assert exc_info.value.field == "event_receiver"
        await task
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_handler_error_is_returned(self):
        session = SessionFixture(user=False)

        def handler(event):
            raise ValueError("handler failed")

        with pytest.raises(ValueError, match="handler failed"):
            await asyncio.wait_for(session.controller.listen(handler), 1.0)
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_malformed_frame_ends_session(self):
        session = SessionFixture()
        task = session.controller.listen(lambda event: False)

        session.clients["user"].feed("{not json")

        with pytest.raises(DecodeError):
            await asyncio.wait_for(task, 1.0)

        with pytest.raises(SendError):
            await session.controller.submit_user_action(GetInstruments())
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_unknown_method_ends_session(self):
        session = SessionFixture(market=False)
        task = session.controller.listen(lambda event: False)

        session.clients["user"].feed({"id": 1, "method": "private/not-a-real-method"})

        with pytest.raises(UnsupportedMethodError):
            await asyncio.wait_for(task, 1.0)
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_transport_error_ends_session(self):
        session = SessionFixture(user=False)
        task = session.controller.listen(lambda event: False)

        session.clients["market"].fail(UnclassifiedError("connection reset"))

        with pytest.raises(UnclassifiedError):
            await asyncio.wait_for(task, 1.0)
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_foreign_error_is_classified(self):
        session = SessionFixture(user=False)
        task = session.controller.listen(lambda event: False)

        session.clients["market"].fail(OSError("socket gone"))

        with pytest.raises(UnclassifiedError):
            await asyncio.wait_for(task, 1.0)
        await session.controller.close()

    @pytest.mark.asyncio
    async def test_clean_close_by_peer_ends_listen(self):
        session = SessionFixture(user=False)
        task = session.controller.listen(lambda event: False)

        session.clients["market"].finish()

        assert await asyncio.wait_for(task, 1.0) is None
        await session.controller.close()


class TestClose:

    @pytest.mark.asyncio
    async def test_close_drains_and_closes_connections(self):
        session = SessionFixture()
        await session.controller.submit_market_action(Subscribe(channels=["ticker.BTC_USDT"]))

        await session.controller.close()

        assert len(session.clients["market"].sent) == 1
        assert session.clients["market"].closed
        assert session.clients["user"].closed
        assert all(task.done() for task in session.controller.background_tasks)

    @pytest.mark.asyncio
    async def test_submit_after_close(self):
        session = SessionFixture()
        await session.controller.close()

        with pytest.raises(SendError):
            await session.controller.submit_market_action(GetInstruments())

    @pytest.mark.asyncio
    async def test_close_ends_listen(self):
        session = SessionFixture()
        task = session.controller.listen(lambda event: False)
        await asyncio.sleep(0)

        await session.controller.close()

        assert await asyncio.wait_for(task, 1.0) is None

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        session = SessionFixture(user=False)
        async with session.controller as controller:
            await controller.submit_market_action(GetInstruments())

        assert session.clients["market"].closed

    @pytest.mark.asyncio
    async def test_peer_close_releases_actions_task(self):
        session = SessionFixture(user=False)
        stream_task, actions_task = session.pumps["market"].tasks

        session.clients["market"].finish()
        await asyncio.wait_for(stream_task, 1.0)

        await asyncio.wait_for(actions_task, 0.5)
        assert not actions_task.cancelled()

        await asyncio.wait_for(session.controller.close(), 0.5)
        assert session.clients["market"].closed
        warnings = [call.args[0] for call in session.logger.warning.call_args_list]
        assert "Stream pump did not drain in time" not in warnings
