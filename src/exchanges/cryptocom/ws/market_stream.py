from ..codec import result_decoder
from ..structs.envelope import EventKind
from ..structs.market import (
    RawBookResult, book_result_from_raw,
    RawCandlestickResult, candlestick_result_from_raw,
    RawOtcBookResult, otc_book_result_from_raw,
    RawTickerResult, ticker_result_from_raw,
    RawTradeResult, trade_result_from_raw,
)
from .classifier import StreamClassifier


class MarketStreamClassifier(StreamClassifier):
    """Market stream: heartbeats and public market data pushes."""

    stream = "market"
    heartbeat_kind = EventKind.MARKET_HEARTBEAT
    handshake_kind = EventKind.MARKET_HANDSHAKE

    subscriptions = {
        "book": (EventKind.BOOK, result_decoder(RawBookResult, book_result_from_raw)),
        "ticker": (EventKind.TICKER, result_decoder(RawTickerResult, ticker_result_from_raw)),
        "trade": (EventKind.TRADE, result_decoder(RawTradeResult, trade_result_from_raw)),
        "candlestick": (EventKind.CANDLESTICK, result_decoder(RawCandlestickResult, candlestick_result_from_raw)),
        "otc_book": (EventKind.OTC_BOOK, result_decoder(RawOtcBookResult, otc_book_result_from_raw)),
    }
    methods = {}
