"""
Spot trading commands. All of them require an authenticated user stream.
"""

from typing import ClassVar, List, Optional

import msgspec

from .base import Action


class PrivateAction(Action):
    requires_auth: ClassVar[bool] = True


class GetAccountSummary(PrivateAction):
    method: ClassVar[str] = "private/get-account-summary"
    currency: Optional[str] = None


class CreateOrder(PrivateAction):
    """
    New order.

    ``order_type`` is LIMIT, MARKET, STOP_LOSS, STOP_LIMIT, TAKE_PROFIT or
    TAKE_PROFIT_LIMIT and is sent as ``type``.
    """
    method: ClassVar[str] = "private/create-order"
    instrument_name: str
    side: str
    order_type: str = msgspec.field(name="type")
    price: Optional[float] = None
    quantity: Optional[float] = None
    notional: Optional[float] = None
    client_oid: Optional[str] = None
    time_in_force: Optional[str] = None
    exec_inst: Optional[str] = None
    trigger_price: Optional[float] = None


class CancelOrder(PrivateAction):
    method: ClassVar[str] = "private/cancel-order"
    instrument_name: str
    order_id: str


class CreateOrderList(PrivateAction):
    """Batch (LIST) or one-cancels-other (OCO) order group."""
    method: ClassVar[str] = "private/create-order-list"
    contingency_type: str
    order_list: List[CreateOrder]


class CancelOrderList(PrivateAction):
    method: ClassVar[str] = "private/cancel-order-list"
    order_list: Optional[List[CancelOrder]] = None
    instrument_name: Optional[str] = None
    contingency_id: Optional[str] = None


class CancelAllOrders(PrivateAction):
    method: ClassVar[str] = "private/cancel-all-orders"
    instrument_name: str


class Paginated(PrivateAction):
    """Time-ranged, paged query."""
    instrument_name: Optional[str] = None
    start_ts: Optional[int] = None
    end_ts: Optional[int] = None
    page_size: Optional[int] = None
    page: Optional[int] = None


class GetOrderHistory(Paginated):
    method: ClassVar[str] = "private/get-order-history"


class GetTrades(Paginated):
    method: ClassVar[str] = "private/get-trades"


class GetOpenOrders(PrivateAction):
    method: ClassVar[str] = "private/get-open-orders"
    instrument_name: Optional[str] = None
    page_size: Optional[int] = None
    page: Optional[int] = None


class GetOrderDetail(PrivateAction):
    method: ClassVar[str] = "private/get-order-detail"
    order_id: str


class SetCancelOnDisconnect(PrivateAction):
    """Scope is ACCOUNT or CONNECTION."""
    method: ClassVar[str] = "private/set-cancel-on-disconnect"
    scope: str


class GetCancelOnDisconnect(PrivateAction):
    method: ClassVar[str] = "private/get-cancel-on-disconnect"
