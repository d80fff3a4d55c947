"""
Canonical, reusable JSON Schemas for the Groww tools.

Enumerated value sets are defined once here and shared by the flat tool input
shapes and the per-action contracts. Do NOT duplicate them per tool.
"""

from __future__ import annotations

from typing import Literal, get_args

# Enumerated value sets, as accepted by the Groww order APIs.
VALIDITY_ENUM = ["DAY", "IOC", "GTD", "GTC", "EOS"]
EXCHANGE_ENUM = ["NSE", "BSE"]
SEGMENT_ENUM = ["CASH", "FNO"]
PRODUCT_ENUM = ["CNC", "MIS", "NRML"]
ORDER_TYPE_ENUM = ["LIMIT", "MARKET", "SL", "SL_M"]
TRANSACTION_TYPE_ENUM = ["BUY", "SELL"]

DEFAULT_EXCHANGE = "NSE"
DEFAULT_SEGMENT = "CASH"

# Described as "at most two hyphens", but the pattern itself does not count them.
ORDER_REFERENCE_ID_PATTERN = r"^[A-Za-z0-9-]{8,20}$"

# One member per action; each tool must implement a handler for every member.
PortfolioAction = Literal["get"]
OrderAction = Literal["place", "modify", "cancel", "status"]
MarketDataAction = Literal["live-quote", "ltp", "ohlc", "historical-candle"]

PORTFOLIO_ACTIONS = list(get_args(PortfolioAction))
ORDER_ACTIONS = list(get_args(OrderAction))
MARKET_DATA_ACTIONS = list(get_args(MarketDataAction))


ValidityField: dict = {
    "type": "string",
    "enum": VALIDITY_ENUM,
    "description": "Order validity: DAY, IOC, GTD, GTC, EOS",
}

ExchangeField: dict = {
    "type": "string",
    "enum": EXCHANGE_ENUM,
    "description": "Stock exchange: NSE, BSE",
}

SegmentField: dict = {
    "type": "string",
    "enum": SEGMENT_ENUM,
    "description": "Segment: CASH (Equity), FNO (Futures & Options)",
}

ProductField: dict = {
    "type": "string",
    "enum": PRODUCT_ENUM,
    "description": "Product type: CNC (Delivery), MIS (Intraday), NRML (Normal)",
}

OrderTypeField: dict = {
    "type": "string",
    "enum": ORDER_TYPE_ENUM,
    "description": "Order type: LIMIT, MARKET, SL, SL_M",
}

TransactionTypeField: dict = {
    "type": "string",
    "enum": TRANSACTION_TYPE_ENUM,
    "description": "Transaction type: BUY, SELL",
}

OrderReferenceIdField: dict = {
    "type": "string",
    "minLength": 8,
    "maxLength": 20,
    "pattern": ORDER_REFERENCE_ID_PATTERN,
    "description": "User provided 8-20 length alphanumeric string with at most two hyphens (-). Used for tracking the order.",
}

TradingSymbolField: dict = {
    "type": "string",
    "description": "Trading symbol of the instrument as defined by the exchange, e.g. HFCL",
}

TradingSymbolsField: dict = {
    "type": "array",
    "items": {"type": "string"},
    "description": "List of trading symbols, e.g. ['HFCL', 'IDEA']",
}


PortfolioInputSchema: dict = {
    "type": "object",
    "properties": {
        "action": {
            "type": "string",
            "enum": PORTFOLIO_ACTIONS,
            "description": "Action to perform on the portfolio. Currently only 'get' is supported.",
        },
    },
    "required": ["action"],
    "additionalProperties": True,
}


OrderInputSchema: dict = {
    "type": "object",
    "properties": {
        "action": {"type": "string", "enum": ORDER_ACTIONS},
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
        "order_reference_id": OrderReferenceIdField,
        "groww_order_id": {"type": "string", "description": "Order id returned by Groww"},
    },
    "required": ["action"],
    "additionalProperties": True,
}


MarketDataInputSchema: dict = {
    "type": "object",
    "properties": {
        "action": {"type": "string", "enum": MARKET_DATA_ACTIONS},
        "trading_symbol": TradingSymbolField,
        "trading_symbols": TradingSymbolsField,
        "exchange": {**ExchangeField, "default": DEFAULT_EXCHANGE},
        "segment": {**SegmentField, "default": DEFAULT_SEGMENT},
        "interval_in_minutes": {
            "type": "string",
            "description": "Candle interval in minutes, e.g. '5'",
        },
        "start_time": {
            "type": "string",
            "description": "Window start, 'yyyy-MM-dd HH:mm:ss' or epoch milliseconds",
        },
        "end_time": {
            "type": "string",
            "description": "Window end, 'yyyy-MM-dd HH:mm:ss' or epoch milliseconds",
        },
    },
    "required": ["action"],
    "additionalProperties": True,
}
