"""
Market Data Tool

Live quotes, last traded prices, OHLC snapshots and historical candles.
"""

import time
from typing import Any, Dict, List, Optional, Tuple, get_args

from groww_mcp.agent.pipeline import Endpoint, call_endpoint
from groww_mcp.agent.tools.base import ActionTool
from groww_mcp.agent.validation.responses import (
    HistoricalCandleResponse,
    LiveQuoteResponse,
    LtpResponse,
    OhlcResponse,
)
from groww_mcp.agent.validation.schemas import MarketDataAction, MarketDataInputSchema

DEFAULT_WINDOW_MS = 24 * 60 * 60 * 1000

LIVE_QUOTE = Endpoint(
    label="Live Data",
    schema=LiveQuoteResponse,
    parse_hint="Could not parse live quote response.",
    invalid_hint="Live quote fetch failed.",
)
LTP = Endpoint(
    label="LTP",
    schema=LtpResponse,
    parse_hint="Could not parse LTP response.",
    invalid_hint="LTP fetch failed.",
)
OHLC = Endpoint(
    label="OHLC",
    schema=OhlcResponse,
    parse_hint="Could not parse OHLC response.",
    invalid_hint="OHLC fetch failed.",
)
HISTORICAL_CANDLE = Endpoint(
    label="Historical Candle",
    schema=HistoricalCandleResponse,
    parse_hint="Could not parse historical candle response.",
    invalid_hint="Historical candle fetch failed.",
)


def exchange_symbols(exchange: str, trading_symbols: List[str]) -> str:
    """('NSE', ['HFCL', 'IDEA']) -> 'NSE_HFCL,NSE_IDEA'"""
    return ",".join(f"{exchange}_{symbol}" for symbol in trading_symbols)


def resolve_candle_window(
    start_time: Optional[str],
    end_time: Optional[str],
    now_ms: Optional[int] = None,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Default the candle window to the last 24 hours.

    Only applies when neither bound is given. A single bound is passed through
    as-is and the other one stays unset.
    """
    if start_time or end_time:
        return start_time, end_time
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return str(now_ms - DEFAULT_WINDOW_MS), str(now_ms)


class MarketDataTool(ActionTool):
    """Real-time and historical market data from Groww"""

    name = "market-data"
    description = "Fetch live quotes, last traded prices (LTP), OHLC, or historical candle data for stocks. Use this tool to get real-time or historical market data."
    input_schema = MarketDataInputSchema
    actions = get_args(MarketDataAction)

    async def handle_live_quote(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("live-quote", args)
        if blocked:
            return blocked

        params = {
            "exchange": payload["exchange"],
            "segment": payload["segment"],
            "trading_symbol": payload["trading_symbol"],
        }
        return await call_endpoint(
            LIVE_QUOTE,
            self.client.get("/v1/live-data/quote", params),
            "Fetched live quote. Use 'market-data' with action='ltp', 'ohlc', or 'historical-candle' for more data.",
        )

    async def handle_ltp(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("ltp", args)
        if blocked:
            return blocked

        params = {
            "segment": payload["segment"],
            "exchange_symbols": exchange_symbols(payload["exchange"], payload["trading_symbols"]),
        }
        return await call_endpoint(
            LTP,
            self.client.get("/v1/live-data/ltp", params),
            "Fetched last traded price(s). Use 'market-data' with other actions for more data.",
        )

    async def handle_ohlc(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("ohlc", args)
        if blocked:
            return blocked

        params = {
            "segment": payload["segment"],
            "exchange_symbols": exchange_symbols(payload["exchange"], payload["trading_symbols"]),
        }
        return await call_endpoint(
            OHLC,
            self.client.get("/v1/live-data/ohlc", params),
            "Fetched OHLC data. Use 'market-data' with other actions for more data.",
        )

    async def handle_historical_candle(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("historical-candle", args)
        if blocked:
            return blocked

        start_time, end_time = resolve_candle_window(payload.get("start_time"), payload.get("end_time"))
        params = {
            "exchange": payload["exchange"],
            "segment": payload["segment"],
            "trading_symbol": payload["trading_symbol"],
            "start_time": start_time,
            "end_time": end_time,
        }
        if payload.get("interval_in_minutes"):
            params["interval_in_minutes"] = payload["interval_in_minutes"]

        return await call_endpoint(
            HISTORICAL_CANDLE,
            self.client.get("/v1/historical/candle/range", params),
            "Fetched historical candle data. Use 'market-data' with other actions for more data.",
        )
