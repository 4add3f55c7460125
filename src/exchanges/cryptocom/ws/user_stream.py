from ..codec import result_decoder
from ..structs.envelope import EventKind
from ..structs.instruments import RawInstruments, instruments_from_raw
from ..structs.user import (
    AccountSummary,
    CancelOrderListResult,
    CreateOrderListResult,
    CreateOrderResult,
    OpenOrders,
    OrderDetail,
    OrderHistory,
    RawUserTradeResult,
    Scope,
    Trades,
    UserBalanceResult,
    UserOrderResult,
    user_trade_result_from_raw,
)
from ..structs.wallet import CreateWithdrawalResult, DepositAddress, WithdrawalHistory
from .classifier import StreamClassifier


def _balances(result: UserBalanceResult):
    return result.data


class UserStreamClassifier(StreamClassifier):
    """User stream: auth results, account pushes and command responses."""

    stream = "user"
    heartbeat_kind = EventKind.USER_HEARTBEAT
    handshake_kind = EventKind.USER_HANDSHAKE

    subscriptions = {
        "user.order": (EventKind.USER_ORDER, result_decoder(UserOrderResult)),
        "user.trade": (EventKind.USER_TRADE, result_decoder(RawUserTradeResult, user_trade_result_from_raw)),
        "user.balance": (EventKind.USER_BALANCE, result_decoder(UserBalanceResult, _balances)),
    }

    methods = {
        "public/auth": (EventKind.AUTH, None),
        "public/get-instruments": (EventKind.GET_INSTRUMENTS, result_decoder(RawInstruments, instruments_from_raw)),
        "private/create-withdrawal": (EventKind.CREATE_WITHDRAWAL, result_decoder(CreateWithdrawalResult)),
        "private/get-withdrawal-history": (EventKind.GET_WITHDRAWAL_HISTORY, result_decoder(WithdrawalHistory)),
        "private/get-deposit-address": (EventKind.GET_DEPOSIT_ADDRESS, result_decoder(DepositAddress)),
        "private/get-account-summary": (EventKind.GET_ACCOUNT_SUMMARY, result_decoder(AccountSummary)),
        "private/create-order": (EventKind.CREATE_ORDER, result_decoder(CreateOrderResult)),
        "private/cancel-order": (EventKind.CANCEL_ORDER, None),
        "private/create-order-list": (EventKind.CREATE_ORDER_LIST, result_decoder(CreateOrderListResult)),
        "private/cancel-order-list": (EventKind.CANCEL_ORDER_LIST, result_decoder(CancelOrderListResult)),
        "private/cancel-all-orders": (EventKind.CANCEL_ALL_ORDERS, None),
        "private/get-order-history": (EventKind.GET_ORDER_HISTORY, result_decoder(OrderHistory)),
        "private/get-open-orders": (EventKind.GET_OPEN_ORDERS, result_decoder(OpenOrders)),
        "private/get-order-detail": (EventKind.GET_ORDER_DETAIL, result_decoder(OrderDetail)),
        "private/get-trades": (EventKind.GET_TRADES, result_decoder(Trades)),
        "private/set-cancel-on-disconnect": (EventKind.SET_CANCEL_ON_DISCONNECT, result_decoder(Scope)),
        "private/get-cancel-on-disconnect": (EventKind.GET_CANCEL_ON_DISCONNECT, result_decoder(Scope)),
    }
