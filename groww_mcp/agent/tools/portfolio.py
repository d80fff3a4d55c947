"""
Portfolio Tool

Fetches the user's current holdings from Groww.
"""

from typing import Any, Dict, get_args

from groww_mcp.agent.pipeline import Endpoint, call_endpoint
from groww_mcp.agent.tools.base import ActionTool
from groww_mcp.agent.validation.responses import PortfolioResponse
from groww_mcp.agent.validation.schemas import PortfolioAction, PortfolioInputSchema

HOLDINGS = Endpoint(
    label="Holdings",
    schema=PortfolioResponse,
    parse_hint="Could not parse portfolio data. Please try again or check your API key.",
    invalid_hint="Portfolio data validation failed. Please check your API key or try again.",
)


class PortfolioTool(ActionTool):
    """Current holdings: trading symbol, quantity and average price"""

    name = "portfolio"
    description = "Fetches the user's current portfolio holdings, including trading symbol, quantity, and average price. Use this tool to view your current investments."
    input_schema = PortfolioInputSchema
    actions = get_args(PortfolioAction)

    async def handle_get(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return await call_endpoint(
            HOLDINGS,
            self.client.get("/v1/holdings/user"),
            "Fetched your portfolio. Use the 'market-data' tool to get live quotes or historical data for any stock in your holdings, or use the 'order' tool to place a buy/sell order.",
        )
