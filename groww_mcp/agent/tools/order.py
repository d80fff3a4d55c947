"""
Order Tool

Place, modify, cancel and look up Groww orders.
"""

import secrets
import string
from typing import Any, Dict, Iterable, get_args
from urllib.parse import quote

from groww_mcp.agent.pipeline import Endpoint, call_endpoint
from groww_mcp.agent.tools.base import ActionTool
from groww_mcp.agent.validation.responses import (
    CancelOrderResponse,
    ModifyOrderResponse,
    OrderStatusResponse,
    PlaceOrderResponse,
)
from groww_mcp.agent.validation.schemas import OrderAction, OrderInputSchema

REFERENCE_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits
REFERENCE_SUFFIX_LENGTH = 4

PLACE_FIELDS = (
    "trading_symbol",
    "quantity",
    "price",
    "trigger_price",
    "validity",
    "exchange",
    "segment",
    "product",
    "order_type",
    "transaction_type",
)
MODIFY_FIELDS = ("quantity", "price", "trigger_price", "order_type", "segment", "groww_order_id")
CANCEL_FIELDS = ("segment", "groww_order_id")

PLACE_ORDER = Endpoint(
    label="Place Order",
    schema=PlaceOrderResponse,
    parse_hint="Could not parse order response. Please try again.",
    invalid_hint="Order placement failed. Please check your input and try again.",
)
MODIFY_ORDER = Endpoint(
    label="Modify Order",
    schema=ModifyOrderResponse,
    parse_hint="Could not parse modify order response. Please try again.",
    invalid_hint="Order modification failed. Please check your input and try again.",
)
CANCEL_ORDER = Endpoint(
    label="Cancel Order",
    schema=CancelOrderResponse,
    parse_hint="Could not parse cancel order response. Please try again.",
    invalid_hint="Order cancellation failed. Please check your input and try again.",
)
ORDER_STATUS = Endpoint(
    label="Get Order Status",
    schema=OrderStatusResponse,
    parse_hint="Could not parse order status response. Please try again.",
    invalid_hint="Order status fetch failed. Please check your input and try again.",
)


def generate_order_reference_id(trading_symbol: str) -> str:
    """<trading_symbol>-<4 random uppercase base36 chars>, e.g. HFCL-7QZ2"""
    suffix = "".join(secrets.choice(REFERENCE_SUFFIX_ALPHABET) for _ in range(REFERENCE_SUFFIX_LENGTH))
    return f"{trading_symbol}-{suffix}"


def _pick(payload: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    return {field: payload[field] for field in fields if payload.get(field) is not None}


class OrderTool(ActionTool):
    """Manage stock orders on Groww"""

    name = "order"
    description = "Place, modify, cancel, or check the status of stock orders. Use this tool to manage your trades on Groww."
    input_schema = OrderInputSchema
    actions = get_args(OrderAction)
    safety = {
        "read_only": False,
        "requires_confirmation": True
    }

    async def handle_place(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("place", args)
        if blocked:
            return blocked

        body = _pick(payload, PLACE_FIELDS)
        # Always generated, so every placement gets a fresh reference.
        body["order_reference_id"] = generate_order_reference_id(payload["trading_symbol"])

        return await call_endpoint(
            PLACE_ORDER,
            self.client.post("/v1/order/create", body),
            "Order placed. Use the 'order' tool with action='status' and the returned groww_order_id to check order status.",
        )

    async def handle_modify(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("modify", args)
        if blocked:
            return blocked

        return await call_endpoint(
            MODIFY_ORDER,
            self.client.post("/v1/order/modify", _pick(payload, MODIFY_FIELDS)),
            "Order modified. Use the 'order' tool with action='status' and the groww_order_id to check order status.",
        )

    async def handle_cancel(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("cancel", args)
        if blocked:
            return blocked

        return await call_endpoint(
            CANCEL_ORDER,
            self.client.post("/v1/order/cancel", _pick(payload, CANCEL_FIELDS)),
            "Order cancelled. Use the 'order' tool with action='status' and the groww_order_id to check order status.",
        )

    async def handle_status(self, args: Dict[str, Any]) -> Dict[str, Any]:
        payload, blocked = self.guard("status", args)
        if blocked:
            return blocked

        path = f"/v1/order/detail/{quote(payload['groww_order_id'], safe='')}"
        return await call_endpoint(
            ORDER_STATUS,
            self.client.get(path, {"segment": payload["segment"]}),
            "Fetched order status. Use the 'order' tool with action='modify' or 'cancel' to update or cancel this order if needed.",
        )
