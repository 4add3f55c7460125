"""
Crypto.com Exchange v2 REST client.

One-shot request/response wrappers without session state. Public endpoints
are plain GETs with query parameters; private endpoints POST a signed
``ApiRequest`` body. Every call returns a RestResponse whose ``result`` is
already the typed record (None when the venue sent no result).
"""

from typing import Any, Callable, Dict, Optional

import msgspec

from config.structs import SessionConfig
from infrastructure.exceptions.exchange import (
    AuthenticationError,
    ExchangeRestError,
    ExchangeServerError,
    TooManyRequestsError,
)
from infrastructure.exceptions.session import MissingConfigurationError
from infrastructure.logging import HFTLoggerInterface, get_exchange_logger
from infrastructure.networking.http import BaseRestClientInterface, HTTPMethod
from ..actions.spot_trading import GetAccountSummary
from ..actions.wallet import CreateWithdrawal, GetDepositAddress, GetWithdrawalHistory
from ..codec import build_request, decode_result, encode_request, result_decoder
from ..structs.envelope import Envelope, RestResponse
from ..structs.instruments import RawInstruments, instruments_from_raw
from ..structs.market import (
    RawBookResult, book_result_from_raw,
    RawCandlestickResult, candlestick_result_from_raw,
    RawTickerResult, ticker_result_from_raw,
    RawTradeResult, trade_result_from_raw,
)
from ..structs.user import AccountSummary
from ..structs.wallet import (
    CreateWithdrawalResult,
    CurrencyNetworks,
    DepositAddress,
    DepositHistory,
    WithdrawalHistory,
)


def _rest_trades(raw: RawTradeResult):
    return trade_result_from_raw(raw, numeric_id=True)


class CryptoComRestClient(BaseRestClientInterface):

    def __init__(self, config: SessionConfig, logger: Optional[HFTLoggerInterface] = None):
        self.config = config
        super().__init__(config.network, logger or get_exchange_logger('cryptocom', 'rest'))

    @property
    def exchange_name(self) -> str:
        return "CRYPTOCOM"

    def _require_rest_url(self) -> str:
        if not self.config.rest_url:
            raise MissingConfigurationError("rest_url")
        return self.config.rest_url

    def _build_url(self, endpoint: str) -> str:
        return f"{self._require_rest_url()}{endpoint}"

    def _handle_error(self, status: int, response_text: str) -> Exception:
        message = response_text
        api_code = None
        try:
            envelope = msgspec.json.decode(response_text, type=Envelope)
        except msgspec.DecodeError:
            pass
        else:
            api_code = envelope.code
            message = envelope.message or response_text

        if status == 401:
            return AuthenticationError(status, message, api_code)
        if status == 429:
            return TooManyRequestsError(status, message, api_code)
        if status >= 500:
            return ExchangeServerError(status, message, api_code)
        return ExchangeRestError(status, message, api_code)

    def _to_response(self, body: Any, decoder: Callable[[Any], Any]) -> RestResponse:
        envelope = decode_result(body, Envelope)
        result = decoder(envelope.result) if envelope.result is not None else None
        return envelope.to_rest_response(result)

    async def _public(self, method: str, decoder: Callable[[Any], Any],
                      params: Optional[Dict[str, Any]] = None) -> RestResponse:
        self._require_rest_url()
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        body = await self.request(HTTPMethod.GET, method, params=query or None)
        return self._to_response(body, decoder)

    async def _private(self, method: str, decoder: Callable[[Any], Any],
                       params: Optional[dict] = None) -> RestResponse:
        self._require_rest_url()
        credentials = self.config.credentials
        if credentials is None or not credentials.api_key:
            raise MissingConfigurationError("api_key")
        if not credentials.secret_key:
            raise MissingConfigurationError("secret_key")

        request = build_request(0, method, params,
                                api_key=credentials.api_key, secret_key=credentials.secret_key)
        body = await self.request(HTTPMethod.POST, method, data=encode_request(request))
        return self._to_response(body, decoder)

    # Public endpoints

    async def get_instruments(self) -> RestResponse:
        return await self._public("public/get-instruments",
                                  result_decoder(RawInstruments, instruments_from_raw))

    async def get_book(self, instrument_name: str, depth: int) -> RestResponse:
        return await self._public("public/get-book",
                                  result_decoder(RawBookResult, book_result_from_raw),
                                  {"instrument_name": instrument_name, "depth": depth})

    async def get_candlestick(self, instrument_name: str, timeframe: str) -> RestResponse:
        return await self._public("public/get-candlestick",
                                  result_decoder(RawCandlestickResult, candlestick_result_from_raw),
                                  {"instrument_name": instrument_name, "timeframe": timeframe})

    async def get_ticker(self, instrument_name: Optional[str] = None) -> RestResponse:
        return await self._public("public/get-ticker",
                                  result_decoder(RawTickerResult, ticker_result_from_raw),
                                  {"instrument_name": instrument_name})

    async def get_trades(self, instrument_name: Optional[str] = None) -> RestResponse:
        return await self._public("public/get-trades",
                                  result_decoder(RawTradeResult, _rest_trades),
                                  {"instrument_name": instrument_name})

    # Private endpoints

    async def get_account_summary(self, currency: Optional[str] = None) -> RestResponse:
        action = GetAccountSummary(currency=currency)
        return await self._private(action.method, result_decoder(AccountSummary), action.params())

    async def create_withdrawal(self, currency: str, amount: float, address: str,
                                client_wid: Optional[str] = None,
                                address_tag: Optional[str] = None,
                                network_id: Optional[str] = None) -> RestResponse:
        action = CreateWithdrawal(currency=currency, amount=amount, address=address,
                                  client_wid=client_wid, address_tag=address_tag, network_id=network_id)
        return await self._private(action.method, result_decoder(CreateWithdrawalResult), action.params())

    async def get_withdrawal_history(self, currency: Optional[str] = None,
                                     start_ts: Optional[int] = None,
                                     end_ts: Optional[int] = None,
                                     page_size: Optional[int] = None,
                                     page: Optional[int] = None,
                                     status: Optional[str] = None) -> RestResponse:
        action = GetWithdrawalHistory(currency=currency, start_ts=start_ts, end_ts=end_ts,
                                      page_size=page_size, page=page, status=status)
        return await self._private(action.method, result_decoder(WithdrawalHistory), action.params())

    async def get_deposit_address(self, currency: str) -> RestResponse:
        action = GetDepositAddress(currency=currency)
        return await self._private(action.method, result_decoder(DepositAddress), action.params())

    async def get_deposit_history(self, currency: Optional[str] = None,
                                  start_ts: Optional[int] = None,
                                  end_ts: Optional[int] = None,
                                  page_size: Optional[int] = None,
                                  page: Optional[int] = None,
                                  status: Optional[str] = None) -> RestResponse:
        params = {
            "currency": currency,
            "start_ts": start_ts,
            "end_ts": end_ts,
            "page_size": page_size,
            "page": page,
            "status": status,
        }
        params = {k: v for k, v in params.items() if v is not None}
        return await self._private("private/get-deposit-history", result_decoder(DepositHistory), params or None)

    async def get_currency_networks(self) -> RestResponse:
        return await self._private("private/get-currency-networks", result_decoder(CurrencyNetworks))
