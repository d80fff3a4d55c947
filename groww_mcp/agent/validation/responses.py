"""
Response models for the Groww REST endpoints.

Every response is an envelope with a `status` string, an optional `payload`
and an optional `error`. Groww does not always populate every payload field,
so most of them are optional. Unknown keys are dropped.

Numbers are validated without coercion and keep their int/float form, so a
validated value dumps back to the same JSON it was parsed from.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, StrictStr
from pydantic_core import PydanticCustomError


def _number(value: Any) -> Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a valid number")
    return value


Number = Annotated[Union[int, float], PlainValidator(_number)]


class GrowwModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# Portfolio

class Holding(GrowwModel):
    trading_symbol: Optional[StrictStr] = Field(..., description="Stock/trading symbol Eg: (HFCL, HIKAL etc)")
    quantity: Number
    average_price: Number = Field(..., description="Average buy price of the stock/trading symbol")


class HoldingsPayload(GrowwModel):
    holdings: Optional[List[Holding]] = None


class PortfolioResponse(GrowwModel):
    status: StrictStr
    payload: Optional[HoldingsPayload] = None
    error: Any = None


# Live data

class LiveQuotePayload(GrowwModel):
    average_price: Optional[Number] = Field(None, description="Average price of the stock in Rupees.")
    bid_quantity: Optional[Number] = None
    bid_price: Optional[Number] = None
    day_change: Optional[Number] = None
    day_change_perc: Optional[Number] = None
    upper_circuit_limit: Optional[Number] = None
    lower_circuit_limit: Optional[Number] = None
    ohlc: Optional[StrictStr] = Field(None, description="OHLC as a stringified object: {open, high, low, close}.")
    depth: Any = Field(None, description="Market depth (buy/sell order book).")
    high_trade_range: Optional[Number] = None
    implied_volatility: Optional[Number] = None
    last_trade_quantity: Optional[Number] = None
    last_trade_time: Optional[Number] = Field(None, description="Last trade time in epoch milliseconds.")
    low_trade_range: Optional[Number] = None
    last_price: Optional[Number] = None
    market_cap: Optional[Number] = None
    offer_price: Optional[Number] = None
    offer_quantity: Optional[Number] = None
    oi_day_change: Optional[Number] = None
    oi_day_change_percentage: Optional[Number] = None
    open_interest: Optional[Number] = None
    previous_open_interest: Optional[Number] = None
    total_buy_quantity: Optional[Number] = None
    total_sell_quantity: Optional[Number] = None
    volume: Optional[Number] = None
    week_52_high: Optional[Number] = None
    week_52_low: Optional[Number] = None


class LiveQuoteResponse(GrowwModel):
    status: StrictStr
    payload: Optional[LiveQuotePayload] = None
    error: Any = None


class LtpResponse(GrowwModel):
    """payload maps EXCHANGE_SYMBOL (e.g. NSE_HFCL) to the last traded price"""

    status: StrictStr
    payload: Optional[Dict[str, Number]] = None
    error: Any = None


class OhlcBar(GrowwModel):
    open: Number
    high: Number
    low: Number
    close: Number


class OhlcResponse(GrowwModel):
    status: StrictStr
    payload: Optional[Dict[str, OhlcBar]] = None
    error: Any = None


class HistoricalCandlePayload(GrowwModel):
    # Each candle: [timestamp, open, high, low, close, volume]
    candles: Optional[List[List[Any]]] = None
    start_time: Optional[StrictStr] = None
    end_time: Optional[StrictStr] = None
    interval_in_minutes: Optional[Number] = None


class HistoricalCandleResponse(GrowwModel):
    status: StrictStr
    payload: Optional[HistoricalCandlePayload] = None
    error: Any = None


# Orders

class PlaceOrderPayload(GrowwModel):
    groww_order_id: StrictStr
    order_status: StrictStr
    order_reference_id: StrictStr
    remark: Optional[StrictStr]


class PlaceOrderResponse(GrowwModel):
    status: StrictStr
    payload: Optional[PlaceOrderPayload] = None
    error: Any = None


class OrderStatePayload(GrowwModel):
    groww_order_id: StrictStr
    order_status: StrictStr


class ModifyOrderResponse(GrowwModel):
    status: StrictStr
    payload: Optional[OrderStatePayload] = None
    error: Any = None


class CancelOrderResponse(GrowwModel):
    status: StrictStr
    payload: Optional[OrderStatePayload] = None
    error: Any = None


class OrderDetailPayload(GrowwModel):
    groww_order_id: StrictStr
    trading_symbol: StrictStr
    order_status: StrictStr
    remark: Optional[StrictStr] = None
    quantity: Number
    price: Optional[Number] = None
    trigger_price: Optional[Number] = None
    filled_quantity: Optional[Number] = None
    remaining_quantity: Optional[Number] = None
    average_fill_price: Optional[Number] = None
    deliverable_quantity: Optional[Number] = None
    amo_status: Optional[StrictStr] = None
    validity: StrictStr
    exchange: StrictStr
    order_type: StrictStr
    transaction_type: StrictStr
    segment: StrictStr
    product: StrictStr
    created_at: Optional[StrictStr] = None
    exchange_time: Optional[StrictStr] = None
    trade_date: Optional[StrictStr] = None
    order_reference_id: Optional[StrictStr] = None


class OrderStatusResponse(GrowwModel):
    status: StrictStr
    payload: Optional[OrderDetailPayload] = None
    error: Any = None
