from typing import List

import msgspec

from .parsing import parse_float


class RawInstrument(msgspec.Struct):
    instrument_name: str
    quote_currency: str
    base_currency: str
    price_decimals: int
    quantity_decimals: int
    margin_trading_enabled: bool
    margin_trading_enabled_5x: bool
    margin_trading_enabled_10x: bool
    max_quantity: str
    min_quantity: str
    max_price: str
    min_price: str
    last_update_date: int
    quantity_tick_size: str
    price_tick_size: str


class RawInstruments(msgspec.Struct):
    instruments: List[RawInstrument]


class Instrument(msgspec.Struct, frozen=True):
    """Tradable instrument with its limits and tick sizes."""
    instrument_name: str
    quote_currency: str
    base_currency: str
    price_decimals: int
    quantity_decimals: int
    margin_trading_enabled: bool
    margin_trading_enabled_5x: bool
    margin_trading_enabled_10x: bool
    max_quantity: float
    min_quantity: float
    max_price: float
    min_price: float
    last_update_date: int
    quantity_tick_size: float
    price_tick_size: float


class Instruments(msgspec.Struct, frozen=True):
    instruments: List[Instrument]


def instrument_from_raw(raw: RawInstrument) -> Instrument:
    return Instrument(
        instrument_name=raw.instrument_name,
        quote_currency=raw.quote_currency,
        base_currency=raw.base_currency,
        price_decimals=raw.price_decimals,
        quantity_decimals=raw.quantity_decimals,
        margin_trading_enabled=raw.margin_trading_enabled,
        margin_trading_enabled_5x=raw.margin_trading_enabled_5x,
        margin_trading_enabled_10x=raw.margin_trading_enabled_10x,
        max_quantity=parse_float(raw.max_quantity, "max_quantity"),
        min_quantity=parse_float(raw.min_quantity, "min_quantity"),
        max_price=parse_float(raw.max_price, "max_price"),
        min_price=parse_float(raw.min_price, "min_price"),
        last_update_date=raw.last_update_date,
        quantity_tick_size=parse_float(raw.quantity_tick_size, "quantity_tick_size"),
        price_tick_size=parse_float(raw.price_tick_size, "price_tick_size"),
    )


def instruments_from_raw(raw: RawInstruments) -> Instruments:
    return Instruments(instruments=[instrument_from_raw(item) for item in raw.instruments])
