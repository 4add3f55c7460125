"""
REST client against a local aiohttp application.
"""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from config.structs import Credentials, SessionConfig
from exchanges.cryptocom.auth import sign_request
from exchanges.cryptocom.rest import CryptoComRestClient
from exchanges.cryptocom.structs import TickerResult
from infrastructure.exceptions.exchange import (
    AuthenticationError,
    ExchangeConnectionRestError,
    ExchangeRestError,
    ExchangeServerError,
    TooManyRequestsError,
)
from infrastructure.exceptions.session import MissingConfigurationError
from tests.helpers.cryptocom_samples import TICKER_RESULT, USER_METHOD_RESULTS


class FakeVenue:
    """Records requests and replies with canned envelopes."""

    def __init__(self):
        self.requests = []
        self.app = web.Application()
        self.app.router.add_get("/v2/public/get-ticker", self.ticker)
        self.app.router.add_get("/v2/public/get-book", self.throttled)
        self.app.router.add_get("/v2/public/get-instruments", self.broken)
        self.app.router.add_post("/v2/private/get-account-summary", self.account_summary)
        self.app.router.add_post("/v2/private/get-currency-networks", self.unauthorized)
        self.app.router.add_post("/v2/private/get-deposit-address", self.rejected)
        self.app.router.add_get("/v2/public/get-trades", self.not_json)

    async def ticker(self, request):
        self.requests.append(("GET", request.path, dict(request.query), None))
        return web.json_response({"id": -1, "method": "public/get-ticker", "code": 0, "result": TICKER_RESULT})

    async def account_summary(self, request):
        body = await request.json()
        self.requests.append(("POST", request.path, dict(request.query), body))
        return web.json_response({
            "id": body["id"],
            "method": body["method"],
            "code": 0,
            "result": USER_METHOD_RESULTS["private/get-account-summary"],
        })

    async def throttled(self, request):
        return web.json_response({"code": 10006, "message": "TOO_MANY_REQUESTS"}, status=429)

    async def broken(self, request):
        return web.Response(text="upstream down", status=503)

    async def unauthorized(self, request):
        return web.json_response({"code": 10002, "message": "UNAUTHORIZED"}, status=401)

    async def rejected(self, request):
        return web.json_response({"code": 10004, "message": "BAD_REQUEST"}, status=400)

    async def not_json(self, request):
        return web.Response(text="<html>", status=200)


@pytest_asyncio.fixture
async def venue():
    fake = FakeVenue()
    server = TestServer(fake.app)
    await server.start_server()
    fake.rest_url = str(server.make_url("/v2/"))
    yield fake
    await server.close()


def make_client(rest_url=None, credentials=None):
    return CryptoComRestClient(SessionConfig(rest_url=rest_url, credentials=credentials))


class TestConfigurationChecks:

    @pytest.mark.asyncio
    async def test_missing_rest_url(self):
        client = make_client()
        with pytest.raises(MissingConfigurationError) as exc_info:
            await client.get_ticker("BTC_USDT")
        assert exc_info.value.field == "rest_url"

    @pytest.mark.asyncio
    async def test_missing_api_key(self):
        client = make_client("http://127.0.0.1:1/v2/")
        with pytest.raises(MissingConfigurationError) as exc_info:
            await client.get_account_summary()
        assert exc_info.value.field == "api_key"

    @pytest.mark.asyncio
    async def test_missing_secret_key(self):
        client = make_client("http://127.0.0.1:1/v2/", Credentials(api_key="key"))
        with pytest.raises(MissingConfigurationError) as exc_info:
            await client.get_currency_networks()
        assert exc_info.value.field == "secret_key"

    @pytest.mark.asyncio
    async def test_rest_url_checked_before_credentials(self):
        with pytest.raises(MissingConfigurationError) as exc_info:
            await make_client().get_account_summary()
        assert exc_info.value.field == "rest_url"


class TestPublicEndpoints:

    @pytest.mark.asyncio
    async def test_get_ticker(self, venue):
        async with make_client(venue.rest_url) as client:
            response = await client.get_ticker("BTC_USDT")

        assert venue.requests == [("GET", "/v2/public/get-ticker", {"instrument_name": "BTC_USDT"}, None)]
        assert response.method == "public/get-ticker"
        assert isinstance(response.result, TickerResult)
        assert response.result.data[0].a == 51174.5

    @pytest.mark.asyncio
    async def test_none_params_not_sent(self, venue):
        async with make_client(venue.rest_url) as client:
            await client.get_ticker()

        assert venue.requests[0][2] == {}

    @pytest.mark.asyncio
    async def test_rate_limited(self, venue):
        async with make_client(venue.rest_url) as client:
            with pytest.raises(TooManyRequestsError) as exc_info:
                await client.get_book("BTC_USDT", 10)

        assert exc_info.value.status_code == 429
        assert exc_info.value.api_code == 10006
        assert exc_info.value.message == "TOO_MANY_REQUESTS"

    @pytest.mark.asyncio
    async def test_server_error_with_plain_body(self, venue):
        async with make_client(venue.rest_url) as client:
            with pytest.raises(ExchangeServerError) as exc_info:
                await client.get_instruments()

        assert exc_info.value.api_code is None
        assert exc_info.value.message == "upstream down"

    @pytest.mark.asyncio
    async def test_invalid_json_body(self, venue):
        async with make_client(venue.rest_url) as client:
            with pytest.raises(ExchangeRestError, match="Invalid JSON"):
                await client.get_trades("BTC_USDT")

    @pytest.mark.asyncio
    async def test_connection_refused(self):
        async with make_client("http://127.0.0.1:1/v2/") as client:
            with pytest.raises(ExchangeConnectionRestError):
                await client.get_ticker("BTC_USDT")


class TestPrivateEndpoints:

    @pytest.mark.asyncio
    async def test_signed_body(self, venue):
        credentials = Credentials(api_key="key", secret_key="secret")
        async with make_client(venue.rest_url, credentials) as client:
            response = await client.get_account_summary("CRO")

        method, path, query, body = venue.requests[0]
        assert (method, path, query) == ("POST", "/v2/private/get-account-summary", {})
        assert body["method"] == "private/get-account-summary"
        assert body["api_key"] == "key"
        assert body["params"] == {"currency": "CRO"}
        assert body["sig"] == sign_request("secret", body["method"], body["id"], "key",
                                           body["params"], body["nonce"])

        assert response.result.accounts[0].currency == "CRO"
        assert response.result.accounts[0].stake == 0.0

    @pytest.mark.asyncio
    async def test_unauthorized(self, venue):
        credentials = Credentials(api_key="key", secret_key="wrong")
        async with make_client(venue.rest_url, credentials) as client:
            with pytest.raises(AuthenticationError) as exc_info:
                await client.get_currency_networks()

        assert exc_info.value.api_code == 10002

    @pytest.mark.asyncio
    async def test_client_error(self, venue):
        credentials = Credentials(api_key="key", secret_key="secret")
        async with make_client(venue.rest_url, credentials) as client:
            with pytest.raises(ExchangeRestError) as exc_info:
                await client.get_deposit_address("BTC")

        assert type(exc_info.value) is ExchangeRestError
        assert exc_info.value.status_code == 400


class TestPerformanceStats:

    @pytest.mark.asyncio
    async def test_counts_successful_requests(self, venue):
        client = make_client(venue.rest_url)
        assert client.get_performance_stats() == {"requests": 0, "avg_latency_ms": 0.0}

        await client.get_ticker("BTC_USDT")
        await client.close()

        assert client.get_performance_stats()["requests"] == 1

