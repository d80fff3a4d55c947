"""
Tests for the schema registry: enumerated value sets, the flat tool input
shapes, per-action contracts and the Groww response models.
"""

import json

import pytest
from pydantic import ValidationError

from groww_mcp.agent.validation.contracts import ACTION_CONTRACTS, get_contract
from groww_mcp.agent.validation.guard import validate_payload
from groww_mcp.agent.validation.responses import (
    HistoricalCandleResponse,
    LiveQuoteResponse,
    LtpResponse,
    OhlcResponse,
    OrderStatusResponse,
    PlaceOrderResponse,
    PortfolioResponse,
)
from groww_mcp.agent.validation.schemas import (
    EXCHANGE_ENUM,
    MARKET_DATA_ACTIONS,
    ORDER_ACTIONS,
    ORDER_TYPE_ENUM,
    PORTFOLIO_ACTIONS,
    PRODUCT_ENUM,
    SEGMENT_ENUM,
    TRANSACTION_TYPE_ENUM,
    VALIDITY_ENUM,
    MarketDataInputSchema,
    OrderInputSchema,
)

ENUM_FIELDS = [
    ("validity", VALIDITY_ENUM),
    ("exchange", EXCHANGE_ENUM),
    ("segment", SEGMENT_ENUM),
    ("product", PRODUCT_ENUM),
    ("order_type", ORDER_TYPE_ENUM),
    ("transaction_type", TRANSACTION_TYPE_ENUM),
]


def test_enum_members():
    assert VALIDITY_ENUM == ["DAY", "IOC", "GTD", "GTC", "EOS"]
    assert EXCHANGE_ENUM == ["NSE", "BSE"]
    assert SEGMENT_ENUM == ["CASH", "FNO"]
    assert PRODUCT_ENUM == ["CNC", "MIS", "NRML"]
    assert ORDER_TYPE_ENUM == ["LIMIT", "MARKET", "SL", "SL_M"]
    assert TRANSACTION_TYPE_ENUM == ["BUY", "SELL"]


@pytest.mark.parametrize("field,members", ENUM_FIELDS)
def test_order_input_accepts_every_enum_member(field, members):
    for member in members:
        assert validate_payload(OrderInputSchema, {"action": "place", field: member}) == {}


@pytest.mark.parametrize("field,members", ENUM_FIELDS)
@pytest.mark.parametrize("bad", ["", "nse", "day", "SL-M", "OTHER"])
def test_order_input_rejects_non_members(field, members, bad):
    report = validate_payload(OrderInputSchema, {"action": "place", field: bad})
    assert field in report


@pytest.mark.parametrize("field", ["exchange", "segment"])
def test_market_data_input_rejects_unknown_exchange_and_segment(field):
    report = validate_payload(MarketDataInputSchema, {"action": "ltp", field: "MCX"})
    assert list(report) == [field]


def test_unknown_fields_are_ignored():
    payload = {"action": "cancel", "groww_order_id": "GMK1", "segment": "CASH", "note": "hi"}
    assert validate_payload(OrderInputSchema, payload) == {}


@pytest.mark.parametrize("ref", ["HFCL-A1B2", "ABCDEFGH", "A-B-C-D-E-F", "a" * 20])
def test_order_reference_id_pattern_accepts(ref):
    assert validate_payload(OrderInputSchema, {"action": "place", "order_reference_id": ref}) == {}


@pytest.mark.parametrize("ref", ["SHORT", "a" * 21, "HFCL_A1B2", "HFCL A1B2"])
def test_order_reference_id_pattern_rejects(ref):
    report = validate_payload(OrderInputSchema, {"action": "place", "order_reference_id": ref})
    assert "order_reference_id" in report


def test_quantity_must_be_a_number():
    report = validate_payload(OrderInputSchema, {"action": "place", "quantity": "10"})
    assert "quantity" in report
    report = validate_payload(OrderInputSchema, {"action": "place", "quantity": True})
    assert "quantity" in report


def test_every_action_has_a_contract():
    expected = (
        [("portfolio", a) for a in PORTFOLIO_ACTIONS]
        + [("order", a) for a in ORDER_ACTIONS]
        + [("market-data", a) for a in MARKET_DATA_ACTIONS]
    )
    assert sorted(ACTION_CONTRACTS) == sorted(expected)


def test_contract_required_fields():
    assert get_contract("order", "place")["required"] == [
        "trading_symbol",
        "quantity",
        "validity",
        "exchange",
        "segment",
        "product",
        "order_type",
        "transaction_type",
    ]
    assert get_contract("order", "modify")["required"] == ["order_type", "segment", "groww_order_id"]
    assert get_contract("order", "cancel")["required"] == ["segment", "groww_order_id"]
    assert get_contract("order", "status")["required"] == ["groww_order_id", "segment"]
    assert get_contract("market-data", "ltp")["required"] == ["trading_symbols"]
    assert get_contract("market-data", "nope") is None


def test_market_contracts_default_exchange_and_segment():
    for action in MARKET_DATA_ACTIONS:
        props = get_contract("market-data", action)["properties"]
        assert props["exchange"]["default"] == "NSE"
        assert props["segment"]["default"] == "CASH"


# Response models

def test_portfolio_response_accepts_holdings():
    data = {
        "status": "SUCCESS",
        "payload": {
            "holdings": [
                {"trading_symbol": "HFCL", "quantity": 10, "average_price": 98.5},
                {"trading_symbol": None, "quantity": 2, "average_price": 100},
            ]
        },
    }
    model = PortfolioResponse.model_validate(data)
    assert model.payload.holdings[0].trading_symbol == "HFCL"
    assert model.payload.holdings[1].trading_symbol is None


def test_portfolio_response_requires_status():
    with pytest.raises(ValidationError) as exc:
        PortfolioResponse.model_validate({"payload": {"holdings": []}})
    assert exc.value.errors()[0]["loc"] == ("status",)


def test_numbers_are_not_coerced_from_strings():
    with pytest.raises(ValidationError) as exc:
        PortfolioResponse.model_validate(
            {"status": "SUCCESS", "payload": {"holdings": [{"trading_symbol": "HFCL", "quantity": "10", "average_price": 1}]}}
        )
    assert exc.value.errors()[0]["loc"] == ("payload", "holdings", 0, "quantity")


def test_strings_are_not_coerced_from_numbers():
    with pytest.raises(ValidationError):
        PortfolioResponse.model_validate({"status": 200})


def test_live_quote_tolerates_missing_fields():
    model = LiveQuoteResponse.model_validate({"status": "SUCCESS", "payload": {"last_price": 101.5}})
    assert model.payload.last_price == 101.5
    assert model.payload.volume is None


def test_ltp_payload_is_an_open_mapping():
    payload = {f"NSE_SYM{i}": 100 + i for i in range(25)}
    model = LtpResponse.model_validate({"status": "SUCCESS", "payload": payload})
    assert model.payload == payload


def test_ltp_rejects_non_numeric_price():
    with pytest.raises(ValidationError) as exc:
        LtpResponse.model_validate({"status": "SUCCESS", "payload": {"NSE_HFCL": "98"}})
    assert exc.value.errors()[0]["loc"] == ("payload", "NSE_HFCL")


def test_ohlc_payload_requires_full_bars():
    good = {"NSE_HFCL": {"open": 1, "high": 2, "low": 0.5, "close": 1.5}}
    assert OhlcResponse.model_validate({"status": "SUCCESS", "payload": good}).payload["NSE_HFCL"].high == 2

    with pytest.raises(ValidationError) as exc:
        OhlcResponse.model_validate({"status": "SUCCESS", "payload": {"NSE_HFCL": {"open": 1}}})
    locs = {e["loc"] for e in exc.value.errors()}
    assert locs == {("payload", "NSE_HFCL", "high"), ("payload", "NSE_HFCL", "low"), ("payload", "NSE_HFCL", "close")}


def test_place_order_remark_is_required_but_nullable():
    payload = {"groww_order_id": "GMK1", "order_status": "OPEN", "order_reference_id": "HFCL-AB12", "remark": None}
    assert PlaceOrderResponse.model_validate({"status": "SUCCESS", "payload": payload}).payload.remark is None

    del payload["remark"]
    with pytest.raises(ValidationError):
        PlaceOrderResponse.model_validate({"status": "SUCCESS", "payload": payload})


def test_order_status_requires_core_fields():
    with pytest.raises(ValidationError) as exc:
        OrderStatusResponse.model_validate({"status": "SUCCESS", "payload": {"groww_order_id": "GMK1"}})
    missing = {e["loc"][-1] for e in exc.value.errors()}
    assert {"trading_symbol", "order_status", "quantity", "validity", "exchange"} <= missing


ROUND_TRIP_CASES = [
    (PortfolioResponse, {"status": "SUCCESS", "payload": {"holdings": [{"trading_symbol": "HFCL", "quantity": 10, "average_price": 98.25}]}}),
    (LtpResponse, {"status": "SUCCESS", "payload": {"NSE_HFCL": 98, "NSE_IDEA": 7.45}}),
    (OhlcResponse, {"status": "SUCCESS", "payload": {"NSE_HFCL": {"open": 97, "high": 99.5, "low": 96, "close": 98.1}}}),
    (HistoricalCandleResponse, {"status": "SUCCESS", "payload": {"candles": [[1717000000, 1, 2, 0.5, 1.5, 1200]], "interval_in_minutes": 5}}),
    (PlaceOrderResponse, {"status": "FAILURE", "error": {"code": "GA001", "message": "Bad request"}}),
]


@pytest.mark.parametrize("model,data", ROUND_TRIP_CASES)
def test_validated_value_round_trips_through_json(model, data):
    dumped = model.model_validate(data).model_dump(mode="json", exclude_unset=True)
    assert dumped == data
    text = json.dumps(dumped, indent=2)
    assert json.dumps(json.loads(text), indent=2) == text


def test_unknown_response_keys_are_dropped():
    model = LtpResponse.model_validate({"status": "SUCCESS", "payload": {"NSE_HFCL": 98}, "extra": 1})
    assert "extra" not in model.model_dump(exclude_unset=True)
