"""
Well-formed sample ``result`` payloads, shaped like venue responses.
"""

ORDER_ITEM = {
    "status": "ACTIVE",
    "side": "BUY",
    "price": 1.0,
    "quantity": 1.0,
    "order_id": "366455245775097673",
    "client_oid": "my_order_0002",
    "create_time": 1588758017375,
    "update_time": 1588758017411,
    "type": "LIMIT",
    "instrument_name": "ETH_CRO",
    "cumulative_quantity": 0.0,
    "cumulative_value": 0.0,
    "avg_price": 0.0,
    "fee_currency": "CRO",
    "time_in_force": "GOOD_TILL_CANCEL",
}

TRADE_ITEM = {
    "side": "SELL",
    "instrument_name": "ETH_CRO",
    "fee": 0.014,
    "trade_id": "367107655537806900",
    "create_time": 1588777459755,
    "traded_price": 7.0,
    "traded_quantity": 1.0,
    "fee_currency": "CRO",
    "order_id": "367107623521528450",
}

RAW_INSTRUMENT = {
    "instrument_name": "BTC_USDT",
    "quote_currency": "USDT",
    "base_currency": "BTC",
    "price_decimals": 2,
    "quantity_decimals": 6,
    "margin_trading_enabled": True,
    "margin_trading_enabled_5x": True,
    "margin_trading_enabled_10x": False,
    "max_quantity": "100000000",
    "min_quantity": "0.000001",
    "max_price": "1000000",
    "min_price": "0.01",
    "last_update_date": 1667272066000,
    "quantity_tick_size": "0.000001",
    "price_tick_size": "0.01",
}

TICKER_RESULT = {
    "instrument_name": "BTC_USDT",
    "subscription": "ticker.BTC_USDT",
    "channel": "ticker",
    "data": [{
        "h": "51790.00",
        "l": "47895.50",
        "a": "51174.500000",
        "i": "BTC_USDT",
        "v": "879.82",
        "vv": "45062393.54",
        "oi": "0",
        "c": "0.0323",
        "b": "51170.000000",
        "bs": "0.1000",
        "k": "51180.000000",
        "ks": "0.2000",
        "t": 1613580710768,
    }],
}

BOOK_RESULT = {
    "instrument_name": "BTC_USDT",
    "subscription": "book.BTC_USDT.10",
    "channel": "book",
    "depth": 10,
    "data": [{
        "bids": [["30082.5", "0.1689", "1"]],
        "asks": [["30083.0", "0.2200", "2"]],
        "t": 1654780033786,
        "u": 542048017824,
    }],
}

TRADE_RESULT = {
    "instrument_name": "BTC_USDT",
    "subscription": "trade.BTC_USDT",
    "channel": "trade",
    "data": [{
        "d": "2030407068",
        "t": 1613581138462,
        "p": "51327.500000",
        "q": "0.000100",
        "s": "BUY",
        "i": "BTC_USDT",
        "dataTime": 1613581138462,
    }],
}

CANDLESTICK_RESULT = {
    "instrument_name": "BTC_USDT",
    "subscription": "candlestick.1m.BTC_USDT",
    "channel": "candlestick",
    "interval": "1m",
    "data": [{
        "o": "51140.000000",
        "h": "51699.000000",
        "l": "51140.000000",
        "c": "51207.500000",
        "v": "1.5",
        "t": 1613580000000,
        "ut": 1613580060000,
    }],
}

OTC_BOOK_RESULT = {
    "instrument_name": "BTC_USDT",
    "subscription": "otc_book.BTC_USDT",
    "channel": "otc_book",
    "t": 1654780033786,
    "data": [{
        "bids": [["30082.5", "1", "1", 1654780035000, 1]],
        "asks": [["30083.0", "2", "1", 1654780035000, 2]],
    }],
}

USER_ORDER_RESULT = {
    "instrument_name": "ETH_CRO",
    "subscription": "user.order.ETH_CRO",
    "channel": "user.order",
    "data": [ORDER_ITEM],
}

USER_TRADE_RESULT = {
    "instrument_name": "ETH_CRO",
    "subscription": "user.trade.ETH_CRO",
    "channel": "user.trade",
    "data": [{
        "side": "SELL",
        "fee": 0.014,
        "trade_id": "367107655537806900",
        "create_time": 1588777459755,
        "traded_price": 7.0,
        "traded_quantity": 1.0,
        "fee_currency": "CRO",
        "order_id": "367107623521528450",
    }],
}

USER_BALANCE_RESULT = {
    "subscription": "user.balance",
    "channel": "user.balance",
    "data": [{
        "currency": "CRO",
        "balance": 99999999947.99626,
        "available": 99999988201.50826,
        "order": 11746.488,
        "stake": 0,
    }],
}

# Method results on the user stream, keyed by method name.
USER_METHOD_RESULTS = {
    "public/get-instruments": {"instruments": [RAW_INSTRUMENT]},
    "private/create-withdrawal": {
        "id": 2220,
        "amount": 1,
        "fee": 0.0004,
        "symbol": "BTC",
        "currency": "BTC",
        "address": "2NBqqD5GRJ8wHy1PYyCXTe9ke5226FhavBf",
        "client_wid": "my_withdrawal_002",
        "create_time": 1607063412000,
    },
    "private/get-withdrawal-history": {
        "withdrawal_list": [{
            "currency": "XRP",
            "client_wid": "",
            "fee": 1.0,
            "create_time": 1607063412000,
            "id": 2220,
            "update_time": 1607063460000,
            "amount": 100,
            "address": "2NBqqD5GRJ8wHy1PYyCXTe9ke5226FhavBf?1234567890",
            "status": "1",
            "txid": "",
            "network_id": None,
        }],
    },
    "private/get-deposit-address": {
        "deposit_address_list": [{
            "currency": "CRO",
            "create_time": 1615886328000,
            "id": 12345,
            "address": "xxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxxx",
            "status": "1",
            "network": "CRO",
        }],
    },
    "private/get-account-summary": {
        "accounts": [{
            "balance": 99999999.905,
            "available": 99999996.905,
            "order": 3,
            "stake": 0,
            "currency": "CRO",
        }],
    },
    "private/create-order": {"order_id": 337843775021233500, "client_oid": "my_order_0002"},
    "private/create-order-list": {
        "result_list": [
            {"index": 0, "code": 0, "order_id": 2015106383706015873, "client_oid": "my_order_0001"},
            {"index": 1, "code": 0, "order_id": 2015119459882149857, "client_oid": "my_order_0002"},
        ],
    },
    "private/cancel-order-list": {
        "result_list": [
            {"index": 0, "code": 0},
            {"index": 1, "code": 0},
        ],
    },
    "private/get-order-history": {"order_list": [ORDER_ITEM]},
    "private/get-open-orders": {"count": 1, "order_list": [ORDER_ITEM]},
    "private/get-order-detail": {"trade_list": [TRADE_ITEM], "order_info": ORDER_ITEM},
    "private/get-trades": {"trade_list": [dict(TRADE_ITEM, liquidity_indicator="TAKER")]},
    "private/set-cancel-on-disconnect": {"scope": "CONNECTION"},
    "private/get-cancel-on-disconnect": {"scope": "CONNECTION"},
}

# Methods whose events carry no data.
USER_DATALESS_METHODS = ("public/auth", "private/cancel-order", "private/cancel-all-orders")
