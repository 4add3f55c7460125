"""
Wire envelope structures shared by the market and user streams.

Every inbound frame is one JSON object decoded into ``Envelope``; every
outbound command is one ``ApiRequest``. Classified envelopes become ``Event``
values on the session's event channel.
"""

from enum import Enum
from typing import Any, Optional, Union

import msgspec

from infrastructure.exceptions.session import AuthFailedError


class ApiRequest(msgspec.Struct, omit_defaults=True):
    """Outbound command. Absent optional fields are omitted from the frame."""
    id: int
    method: str
    params: Optional[dict] = None
    api_key: Optional[str] = None
    sig: Optional[str] = None
    nonce: Optional[int] = None


class Envelope(msgspec.Struct):
    """
    Decoded inbound frame.

    ``code`` absent or 0 means success; any other value is a server-side
    rejection and ``result`` may be absent.
    """
    id: int = -1
    method: str = ""
    result: Any = None
    code: Optional[int] = None
    message: Optional[str] = None
    original: Optional[str] = None
    detail_code: Optional[Union[int, str]] = None
    detail_message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.code is None or self.code == 0

    def to_event(self, kind: "EventKind", data: Any = None) -> "Event":
        return Event(
            kind=kind,
            data=data,
            id=self.id,
            method=self.method,
            code=self.code,
            message=self.message,
            original=self.original,
            detail_code=self.detail_code,
            detail_message=self.detail_message,
        )

    def to_rest_response(self, result: Any) -> "RestResponse":
        return RestResponse(
            id=self.id,
            method=self.method,
            result=result,
            code=self.code,
            message=self.message,
            original=self.original,
            detail_code=self.detail_code,
            detail_message=self.detail_message,
        )


class EventKind(Enum):
    AUTH = "auth"
    TICKER = "ticker"
    BOOK = "book"
    TRADE = "trade"
    CANDLESTICK = "candlestick"
    OTC_BOOK = "otc_book"
    USER_ORDER = "user_order"
    USER_TRADE = "user_trade"
    USER_BALANCE = "user_balance"
    GET_INSTRUMENTS = "get_instruments"
    CREATE_WITHDRAWAL = "create_withdrawal"
    GET_WITHDRAWAL_HISTORY = "get_withdrawal_history"
    GET_DEPOSIT_ADDRESS = "get_deposit_address"
    GET_ACCOUNT_SUMMARY = "get_account_summary"
    CREATE_ORDER = "create_order"
    CANCEL_ORDER = "cancel_order"
    CREATE_ORDER_LIST = "create_order_list"
    CANCEL_ORDER_LIST = "cancel_order_list"
    CANCEL_ALL_ORDERS = "cancel_all_orders"
    GET_ORDER_HISTORY = "get_order_history"
    GET_OPEN_ORDERS = "get_open_orders"
    GET_ORDER_DETAIL = "get_order_detail"
    GET_TRADES = "get_trades"
    SET_CANCEL_ON_DISCONNECT = "set_cancel_on_disconnect"
    GET_CANCEL_ON_DISCONNECT = "get_cancel_on_disconnect"
    USER_HEARTBEAT = "user_heartbeat"
    USER_HANDSHAKE = "user_handshake"
    MARKET_HEARTBEAT = "market_heartbeat"
    MARKET_HANDSHAKE = "market_handshake"


class Event(msgspec.Struct, frozen=True):
    """
    Classified inbound occurrence, as delivered to the listen handler.

    ``data`` holds the typed record for the kind (None for kinds that carry no
    payload). The envelope metadata is kept so handlers can match ``id``
    against the id returned at submission and inspect ``code``.
    """
    kind: EventKind
    data: Any = None
    id: int = -1
    method: str = ""
    code: Optional[int] = None
    message: Optional[str] = None
    original: Optional[str] = None
    detail_code: Optional[Union[int, str]] = None
    detail_message: Optional[str] = None

    @classmethod
    def marker(cls, kind: EventKind) -> "Event":
        """Lifecycle marker with default envelope metadata (handshakes)."""
        return cls(kind=kind)

    @property
    def is_success(self) -> bool:
        return self.code is None or self.code == 0

    def raise_for_auth(self) -> None:
        """Raise AuthFailedError if this is a rejected auth result."""
        if self.kind is EventKind.AUTH and not self.is_success:
            raise AuthFailedError(self.code)


class RestResponse(msgspec.Struct, frozen=True):
    """REST reply with its result already converted to the typed record."""
    id: int = -1
    method: str = ""
    result: Any = None
    code: Optional[int] = None
    message: Optional[str] = None
    original: Optional[str] = None
    detail_code: Optional[Union[int, str]] = None
    detail_message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.code is None or self.code == 0
