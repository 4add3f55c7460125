"""
Account, order and trade records from the user stream.
"""

from typing import List, Optional

import msgspec

from .parsing import parse_int


class OrderItem(msgspec.Struct, frozen=True):
    """One order as reported by pushes and order queries."""
    status: str
    side: str
    price: float
    quantity: float
    order_id: str
    client_oid: str
    create_time: int
    update_time: int
    instrument_name: str
    cumulative_quantity: float
    cumulative_value: float
    avg_price: float
    fee_currency: str
    time_in_force: str
    order_type: str = msgspec.field(name="type")
    reason: Optional[str] = None
    exec_inst: Optional[str] = None
    trigger_price: Optional[float] = None


class UserOrderResult(msgspec.Struct, frozen=True):
    instrument_name: str
    subscription: str
    channel: str
    data: List[OrderItem]


class RawUserTrade(msgspec.Struct):
    side: str
    fee: float
    trade_id: str
    create_time: int
    traded_price: float
    traded_quantity: float
    fee_currency: str
    order_id: str


class RawUserTradeResult(msgspec.Struct):
    instrument_name: str
    subscription: str
    channel: str
    data: List[RawUserTrade]


class UserTrade(msgspec.Struct, frozen=True):
    side: str
    fee: float
    trade_id: int
    create_time: int
    traded_price: float
    traded_quantity: float
    fee_currency: str
    order_id: int


class UserTradeResult(msgspec.Struct, frozen=True):
    instrument_name: str
    subscription: str
    channel: str
    data: List[UserTrade]


def user_trade_from_raw(raw: RawUserTrade) -> UserTrade:
    return UserTrade(
        side=raw.side,
        fee=raw.fee,
        trade_id=parse_int(raw.trade_id, "trade_id"),
        create_time=raw.create_time,
        traded_price=raw.traded_price,
        traded_quantity=raw.traded_quantity,
        fee_currency=raw.fee_currency,
        order_id=parse_int(raw.order_id, "order_id"),
    )


def user_trade_result_from_raw(raw: RawUserTradeResult) -> UserTradeResult:
    return UserTradeResult(
        instrument_name=raw.instrument_name,
        subscription=raw.subscription,
        channel=raw.channel,
        data=[user_trade_from_raw(item) for item in raw.data],
    )


class UserBalance(msgspec.Struct, frozen=True):
    currency: str
    balance: float
    available: float
    order: float
    stake: float


class UserBalanceResult(msgspec.Struct):
    data: List[UserBalance]


class Account(msgspec.Struct, frozen=True):
    balance: float
    available: float
    order: float
    stake: float
    currency: str


class AccountSummary(msgspec.Struct, frozen=True):
    accounts: List[Account]


class CreateOrderResult(msgspec.Struct, frozen=True):
    order_id: int
    client_oid: Optional[str] = None


class CreateOrderListItem(msgspec.Struct, frozen=True):
    index: int
    code: int
    order_id: int
    message: Optional[str] = None
    client_oid: Optional[str] = None


class CreateOrderListResult(msgspec.Struct, frozen=True):
    result_list: List[CreateOrderListItem]


class CancelOrderListItem(msgspec.Struct, frozen=True):
    index: int
    code: int
    message: Optional[str] = None


class CancelOrderListResult(msgspec.Struct, frozen=True):
    result_list: List[CancelOrderListItem]


class OpenOrders(msgspec.Struct, frozen=True):
    count: int
    order_list: List[OrderItem]


class OrderHistory(msgspec.Struct, frozen=True):
    order_list: List[OrderItem]


class OrderDetailTradeListItem(msgspec.Struct, frozen=True):
    side: str
    instrument_name: str
    fee: float
    trade_id: str
    create_time: int
    traded_price: float
    traded_quantity: float
    fee_currency: str
    order_id: str


class OrderDetail(msgspec.Struct, frozen=True):
    trade_list: List[OrderDetailTradeListItem]
    order_info: OrderItem


class TradeListItem(msgspec.Struct, frozen=True):
    side: str
    instrument_name: str
    fee: float
    trade_id: str
    create_time: int
    traded_price: float
    traded_quantity: float
    fee_currency: str
    order_id: str
    client_order_id: Optional[str] = None
    liquidity_indicator: Optional[str] = None


class Trades(msgspec.Struct, frozen=True):
    trade_list: List[TradeListItem]


class Scope(msgspec.Struct, frozen=True):
    """Cancel-on-disconnect scope, ACCOUNT or CONNECTION."""
    scope: str
