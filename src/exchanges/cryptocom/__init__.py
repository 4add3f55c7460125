"""
Crypto.com Exchange v2 session client.

Usage:
    from exchanges.cryptocom import SessionBuilder, Subscribe, EventKind

    builder = SessionBuilder()
    await builder.with_market_stream(market_url)
    session = builder.build()

    await session.submit_market_action(Subscribe(channels=["ticker.BTC_USDT"]))

    def on_event(event):
        if event.kind is EventKind.TICKER:
            print(event.data.data[0].a)
            return True

    await session.listen(on_event)
"""

from .actions import (
    Action, Subscribe, Unsubscribe, GetInstruments, Auth,
    GetAccountSummary, CreateOrder, CancelOrder, CreateOrderList, CancelOrderList, CancelAllOrders,
    GetOrderHistory, GetTrades, GetOpenOrders, GetOrderDetail, SetCancelOnDisconnect, GetCancelOnDisconnect,
    CreateWithdrawal, GetWithdrawalHistory, GetDepositAddress,
)
from .auth import params_to_str, sign_request
from .codec import build_request, decode_frame, decode_result, encode_request
from .rest import CryptoComRestClient
from .structs import ApiRequest, Envelope, Event, EventKind, RestResponse
from .ws import (
    EventReceiver,
    SessionBuilder,
    SessionCapability,
    SessionController,
)

__all__ = [
    'Action', 'Subscribe', 'Unsubscribe', 'GetInstruments', 'Auth',
    'GetAccountSummary', 'CreateOrder', 'CancelOrder', 'CreateOrderList', 'CancelOrderList',
    'CancelAllOrders', 'GetOrderHistory', 'GetTrades', 'GetOpenOrders', 'GetOrderDetail',
    'SetCancelOnDisconnect', 'GetCancelOnDisconnect',
    'CreateWithdrawal', 'GetWithdrawalHistory', 'GetDepositAddress',
    'params_to_str', 'sign_request',
    'build_request', 'decode_frame', 'decode_result', 'encode_request',
    'CryptoComRestClient',
    'ApiRequest', 'Envelope', 'Event', 'EventKind', 'RestResponse',
    'EventReceiver', 'SessionBuilder', 'SessionCapability', 'SessionController',
]
