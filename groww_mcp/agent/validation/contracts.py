"""
Action contracts: map each (tool, action) pair to the schema its handler must satisfy.

The flat tool input shapes only describe which fields exist. The contracts
here decide which of them a given action needs, and which defaults apply.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .schemas import (
    DEFAULT_EXCHANGE,
    DEFAULT_SEGMENT,
    ExchangeField,
    OrderTypeField,
    ProductField,
    SegmentField,
    TradingSymbolField,
    TradingSymbolsField,
    TransactionTypeField,
    ValidityField,
)


PortfolioGetContract: dict = {
    "type": "object",
    "properties": {},
    "required": [],
}


PlaceOrderContract: dict = {
    "type": "object",
    "properties": {
        "trading_symbol": TradingSymbolField,
        "quantity": {"type": "number"},
        "price": {"type": "number"},
        "trigger_price": {"type": "number"},
        "validity": ValidityField,
        "exchange": ExchangeField,
        "segment": SegmentField,
        "product": ProductField,
        "order_type": OrderTypeField,
        "transaction_type": TransactionTypeField,
    },
    "required": [
        "trading_symbol",
        "quantity",
        "validity",
        "exchange",
        "segment",
        "product",
        "order_type",
        "transaction_type",
    ],
}

ModifyOrderContract: dict = {
    "type": "object",
    "properties": {
        "quantity": {"type": "number"},
        "price": {"type": "number"},
        "trigger_price": {"type": "number"},
        "order_type": OrderTypeField,
        "segment": SegmentField,
        "groww_order_id": {"type": "string"},
    },
    "required": ["order_type", "segment", "groww_order_id"],
}

CancelOrderContract: dict = {
    "type": "object",
    "properties": {
        "segment": SegmentField,
        "groww_order_id": {"type": "string"},
    },
    "required": ["segment", "groww_order_id"],
}

OrderStatusContract: dict = {
    "type": "object",
    "properties": {
        "groww_order_id": {"type": "string"},
        "segment": SegmentField,
    },
    "required": ["groww_order_id", "segment"],
}


_MARKET_CONTEXT: dict = {
    "exchange": {**ExchangeField, "default": DEFAULT_EXCHANGE},
    "segment": {**SegmentField, "default": DEFAULT_SEGMENT},
}

LiveQuoteContract: dict = {
    "type": "object",
    "properties": {**_MARKET_CONTEXT, "trading_symbol": TradingSymbolField},
    "required": ["trading_symbol"],
}

LtpContract: dict = {
    "type": "object",
    "properties": {**_MARKET_CONTEXT, "trading_symbols": {**TradingSymbolsField, "minItems": 1}},
    "required": ["trading_symbols"],
}

OhlcContract: dict = {
    "type": "object",
    "properties": {**_MARKET_CONTEXT, "trading_symbols": {**TradingSymbolsField, "minItems": 1}},
    "required": ["trading_symbols"],
}

HistoricalCandleContract: dict = {
    "type": "object",
    "properties": {
        **_MARKET_CONTEXT,
        "trading_symbol": TradingSymbolField,
        "start_time": {"type": "string"},
        "end_time": {"type": "string"},
        "interval_in_minutes": {"type": "string"},
    },
    "required": ["trading_symbol"],
}


ACTION_CONTRACTS: Dict[Tuple[str, str], dict] = {
    ("portfolio", "get"): PortfolioGetContract,

    ("order", "place"): PlaceOrderContract,
    ("order", "modify"): ModifyOrderContract,
    ("order", "cancel"): CancelOrderContract,
    ("order", "status"): OrderStatusContract,

    ("market-data", "live-quote"): LiveQuoteContract,
    ("market-data", "ltp"): LtpContract,
    ("market-data", "ohlc"): OhlcContract,
    ("market-data", "historical-candle"): HistoricalCandleContract,
}


def get_contract(tool_name: str, action: str) -> Optional[dict]:
    return ACTION_CONTRACTS.get((tool_name, action))
