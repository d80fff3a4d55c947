from groww_mcp.agent.tools.base import ActionTool, Tool
from groww_mcp.agent.tools.market_data import MarketDataTool
from groww_mcp.agent.tools.order import OrderTool
from groww_mcp.agent.tools.portfolio import PortfolioTool

__all__ = ["Tool", "ActionTool", "PortfolioTool", "OrderTool", "MarketDataTool"]
