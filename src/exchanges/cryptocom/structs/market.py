"""
Market data records.

The venue sends prices and sizes as decimal strings. ``Raw*`` structs mirror
the wire shape; the ``*_from_raw`` functions produce the cooked records handed
to application code. The same cooked records serve the REST market endpoints,
which is why stream-only fields are optional.
"""

from typing import List, Optional, Tuple, Union

import msgspec

from .parsing import parse_float, parse_int, parse_optional_float


class SubscriptionHeader(msgspec.Struct):
    """Common fields of every ``subscribe`` push, decoded first to pick the channel."""
    channel: str
    subscription: str
    interval: Optional[str] = None
    instrument_name: Optional[str] = None
    t: Optional[int] = None


# Ticker

class RawTicker(msgspec.Struct):
    h: str
    i: str
    v: str
    vv: str
    oi: str
    t: int
    l: Optional[str] = None
    a: Optional[str] = None
    c: Optional[str] = None
    b: Optional[str] = None
    bs: Optional[str] = None
    k: Optional[str] = None
    ks: Optional[str] = None


class RawTickerResult(msgspec.Struct):
    data: List[RawTicker]
    channel: Optional[str] = None
    subscription: Optional[str] = None
    instrument_name: Optional[str] = None


class Ticker(msgspec.Struct, frozen=True):
    """
    24h ticker.

    Attributes:
        h: 24h highest trade price
        l: 24h lowest trade price, None without trades
        a: latest trade price, None without trades
        i: instrument name
        v: 24h traded volume
        vv: 24h traded volume value (USD)
        oi: open interest
        c: 24h price change, None without trades
        b / bs: best bid price / size, None without bids
        k / ks: best ask price / size, None without asks
        t: trade timestamp (epoch ms)
    """
    h: float
    i: str
    v: float
    vv: float
    oi: float
    t: int
    l: Optional[float] = None
    a: Optional[float] = None
    c: Optional[float] = None
    b: Optional[float] = None
    bs: Optional[float] = None
    k: Optional[float] = None
    ks: Optional[float] = None


class TickerResult(msgspec.Struct, frozen=True):
    data: List[Ticker]
    channel: Optional[str] = None
    subscription: Optional[str] = None
    instrument_name: Optional[str] = None


def ticker_from_raw(raw: RawTicker) -> Ticker:
    return Ticker(
        h=parse_float(raw.h, "h"),
        i=raw.i,
        v=parse_float(raw.v, "v"),
        vv=parse_float(raw.vv, "vv"),
        oi=parse_float(raw.oi, "oi"),
        t=raw.t,
        l=parse_optional_float(raw.l, "l"),
        a=parse_optional_float(raw.a, "a"),
        c=parse_optional_float(raw.c, "c"),
        b=parse_optional_float(raw.b, "b"),
        bs=parse_optional_float(raw.bs, "bs"),
        k=parse_optional_float(raw.k, "k"),
        ks=parse_optional_float(raw.ks, "ks"),
    )


def ticker_result_from_raw(raw: RawTickerResult) -> TickerResult:
    return TickerResult(
        data=[ticker_from_raw(item) for item in raw.data],
        channel=raw.channel,
        subscription=raw.subscription,
        instrument_name=raw.instrument_name,
    )


# Book

BookLevel = Tuple[float, float, int]  # price, total size, number of orders


class RawBook(msgspec.Struct):
    bids: List[Tuple[str, str, str]]
    asks: List[Tuple[str, str, str]]
    tt: Optional[int] = None
    t: Optional[int] = None
    u: Optional[int] = None
    cs: Optional[int] = None


class RawBookResult(msgspec.Struct):
    instrument_name: str
    depth: int
    data: List[RawBook]
    subscription: Optional[str] = None
    channel: Optional[str] = None


class Book(msgspec.Struct, frozen=True):
    """
    Order book snapshot.

    Attributes:
        bids / asks: levels of (price, total size, number of standing orders)
        tt: epoch ms of last book update
        t: epoch ms of message publish
        u: update sequence
        cs: checksum, internal use
    """
    bids: List[BookLevel]
    asks: List[BookLevel]
    tt: Optional[int] = None
    t: Optional[int] = None
    u: Optional[int] = None
    cs: Optional[int] = None


class BookResult(msgspec.Struct, frozen=True):
    instrument_name: str
    depth: int
    data: List[Book]
    subscription: Optional[str] = None
    channel: Optional[str] = None


def _book_level(level: Tuple[str, str, str]) -> BookLevel:
    return (
        parse_float(level[0], "price of the level"),
        parse_float(level[1], "total size of the level"),
        parse_int(level[2], "number of standing orders in the level"),
    )


def book_from_raw(raw: RawBook) -> Book:
    return Book(
        bids=[_book_level(level) for level in raw.bids],
        asks=[_book_level(level) for level in raw.asks],
        tt=raw.tt,
        t=raw.t,
        u=raw.u,
        cs=raw.cs,
    )


def book_result_from_raw(raw: RawBookResult) -> BookResult:
    return BookResult(
        instrument_name=raw.instrument_name,
        depth=raw.depth,
        data=[book_from_raw(item) for item in raw.data],
        subscription=raw.subscription,
        channel=raw.channel,
    )


# Trade

class RawTrade(msgspec.Struct):
    s: str
    p: str
    q: str
    t: int
    d: str
    i: str
    data_time: Optional[int] = msgspec.field(default=None, name="dataTime")


class RawTradeResult(msgspec.Struct):
    data: List[RawTrade]
    instrument_name: Optional[str] = None
    subscription: Optional[str] = None
    channel: Optional[str] = None


class Trade(msgspec.Struct, frozen=True):
    """
    Public trade.

    Attributes:
        s: side, BUY or SELL
        p: trade price
        q: trade quantity
        t: trade timestamp (epoch ms)
        d: trade id (string on the stream, integer from REST)
        i: instrument name
        data_time: REST only
    """
    s: str
    p: float
    q: float
    t: int
    d: Union[int, str]
    i: str
    data_time: Optional[int] = None


class TradeResult(msgspec.Struct, frozen=True):
    data: List[Trade]
    instrument_name: Optional[str] = None
    subscription: Optional[str] = None
    channel: Optional[str] = None


def trade_from_raw(raw: RawTrade, numeric_id: bool = False) -> Trade:
    return Trade(
        s=raw.s,
        p=parse_float(raw.p, "p"),
        q=parse_float(raw.q, "q"),
        t=raw.t,
        d=parse_int(raw.d, "d") if numeric_id else raw.d,
        i=raw.i,
        data_time=raw.data_time,
    )


def trade_result_from_raw(raw: RawTradeResult, numeric_id: bool = False) -> TradeResult:
    return TradeResult(
        data=[trade_from_raw(item, numeric_id) for item in raw.data],
        instrument_name=raw.instrument_name,
        subscription=raw.subscription,
        channel=raw.channel,
    )


# Candlestick

class RawCandlestick(msgspec.Struct):
    t: int
    o: str
    h: str
    l: str
    c: str
    v: str
    ut: Optional[int] = None


class RawCandlestickResult(msgspec.Struct):
    instrument_name: str
    interval: str
    data: List[RawCandlestick]
    subscription: Optional[str] = None
    channel: Optional[str] = None


class Candlestick(msgspec.Struct, frozen=True):
    """OHLCV bar. ``t`` is the start time, ``ut`` the update time (stream only)."""
    t: int
    o: float
    h: float
    l: float
    c: float
    v: float
    ut: Optional[int] = None


class CandlestickResult(msgspec.Struct, frozen=True):
    instrument_name: str
    interval: str
    data: List[Candlestick]
    subscription: Optional[str] = None
    channel: Optional[str] = None


def candlestick_from_raw(raw: RawCandlestick) -> Candlestick:
    return Candlestick(
        t=raw.t,
        o=parse_float(raw.o, "o"),
        h=parse_float(raw.h, "h"),
        l=parse_float(raw.l, "l"),
        c=parse_float(raw.c, "c"),
        v=parse_float(raw.v, "v"),
        ut=raw.ut,
    )


def candlestick_result_from_raw(raw: RawCandlestickResult) -> CandlestickResult:
    return CandlestickResult(
        instrument_name=raw.instrument_name,
        interval=raw.interval,
        data=[candlestick_from_raw(item) for item in raw.data],
        subscription=raw.subscription,
        channel=raw.channel,
    )


# OTC book

OtcBookLevel = Tuple[float, int, int, int, int]  # price, size, orders, expiry (epoch ms), level id


class RawOtcBook(msgspec.Struct):
    bids: List[Tuple[str, str, str, int, int]]
    asks: List[Tuple[str, str, str, int, int]]


class RawOtcBookResult(msgspec.Struct):
    channel: str
    subscription: str
    instrument_name: str
    t: Optional[int] = None
    data: Optional[List[RawOtcBook]] = None


class OtcBook(msgspec.Struct, frozen=True):
    bids: List[OtcBookLevel]
    asks: List[OtcBookLevel]


class OtcBookResult(msgspec.Struct, frozen=True):
    channel: str
    subscription: str
    instrument_name: str
    t: Optional[int] = None
    data: Optional[List[OtcBook]] = None


def _otc_level(level: Tuple[str, str, str, int, int]) -> OtcBookLevel:
    return (
        parse_float(level[0], "price of the level"),
        parse_int(level[1], "total size of the level"),
        parse_int(level[2], "number of standing orders in the level"),
        level[3],
        level[4],
    )


def otc_book_from_raw(raw: RawOtcBook) -> OtcBook:
    return OtcBook(
        bids=[_otc_level(level) for level in raw.bids],
        asks=[_otc_level(level) for level in raw.asks],
    )


def otc_book_result_from_raw(raw: RawOtcBookResult) -> OtcBookResult:
    return OtcBookResult(
        channel=raw.channel,
        subscription=raw.subscription,
        instrument_name=raw.instrument_name,
        t=raw.t,
        data=None if raw.data is None else [otc_book_from_raw(item) for item in raw.data],
    )
