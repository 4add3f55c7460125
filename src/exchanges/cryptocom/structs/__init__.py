from .envelope import ApiRequest, Envelope, Event, EventKind, RestResponse
from .market import (
    SubscriptionHeader,
    RawTicker, RawTickerResult, Ticker, TickerResult, ticker_result_from_raw,
    RawBook, RawBookResult, Book, BookResult, book_result_from_raw,
    RawTrade, RawTradeResult, Trade, TradeResult, trade_result_from_raw,
    RawCandlestick, RawCandlestickResult, Candlestick, CandlestickResult, candlestick_result_from_raw,
    RawOtcBook, RawOtcBookResult, OtcBook, OtcBookResult, otc_book_result_from_raw,
)
from .user import (
    OrderItem, UserOrderResult,
    RawUserTrade, RawUserTradeResult, UserTrade, UserTradeResult, user_trade_result_from_raw,
    UserBalance, UserBalanceResult,
    Account, AccountSummary,
    CreateOrderResult, CreateOrderListItem, CreateOrderListResult,
    CancelOrderListItem, CancelOrderListResult,
    OpenOrders, OrderHistory, OrderDetailTradeListItem, OrderDetail,
    TradeListItem, Trades, Scope,
)
from .wallet import (
    CreateWithdrawalResult, WithdrawalItem, WithdrawalHistory,
    DepositAddressItem, DepositAddress, DepositHistoryItem, DepositHistory,
    CurrencyNetwork, CurrencyMap, CurrencyNetworks,
)
from .instruments import RawInstrument, RawInstruments, Instrument, Instruments, instruments_from_raw

__all__ = [
    'ApiRequest', 'Envelope', 'Event', 'EventKind', 'RestResponse',
    'SubscriptionHeader',
    'RawTicker', 'RawTickerResult', 'Ticker', 'TickerResult', 'ticker_result_from_raw',
    'RawBook', 'RawBookResult', 'Book', 'BookResult', 'book_result_from_raw',
    'RawTrade', 'RawTradeResult', 'Trade', 'TradeResult', 'trade_result_from_raw',
    'RawCandlestick', 'RawCandlestickResult', 'Candlestick', 'CandlestickResult', 'candlestick_result_from_raw',
    'RawOtcBook', 'RawOtcBookResult', 'OtcBook', 'OtcBookResult', 'otc_book_result_from_raw',
    'OrderItem', 'UserOrderResult',
    'RawUserTrade', 'RawUserTradeResult', 'UserTrade', 'UserTradeResult', 'user_trade_result_from_raw',
    'UserBalance', 'UserBalanceResult',
    'Account', 'AccountSummary',
    'CreateOrderResult', 'CreateOrderListItem', 'CreateOrderListResult',
    'CancelOrderListItem', 'CancelOrderListResult',
    'OpenOrders', 'OrderHistory', 'OrderDetailTradeListItem', 'OrderDetail',
    'TradeListItem', 'Trades', 'Scope',
    'CreateWithdrawalResult', 'WithdrawalItem', 'WithdrawalHistory',
    'DepositAddressItem', 'DepositAddress', 'DepositHistoryItem', 'DepositHistory',
    'CurrencyNetwork', 'CurrencyMap', 'CurrencyNetworks',
    'RawInstrument', 'RawInstruments', 'Instrument', 'Instruments', 'instruments_from_raw',
]
