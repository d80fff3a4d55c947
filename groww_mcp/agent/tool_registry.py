"""
Tool Registry

Holds the tools the agent can use. This is the single source of truth for what
tools are exposed.
"""

from typing import Any, Dict, Optional, Tuple

from loguru import logger

from groww_mcp.agent.tools import MarketDataTool, OrderTool, PortfolioTool, Tool
from groww_mcp.config import Settings
from groww_mcp.trading import GrowwClient

# Tool names from the first version of the server, one tool per endpoint.
LEGACY_TOOL_ACTIONS: Dict[str, Tuple[str, str]] = {
    "get-portfolio": ("portfolio", "get"),
    "get-live-quote": ("market-data", "live-quote"),
    "get-last-traded-price": ("market-data", "ltp"),
    "get-ohlc": ("market-data", "ohlc"),
    "place-order": ("order", "place"),
    "modify-order": ("order", "modify"),
    "cancel-order": ("order", "cancel"),
    "get-order-status": ("order", "status"),
}


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool in the registry"""
        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def resolve(self, name: str) -> Tuple[Optional[Tool], Optional[str]]:
        """
        Find a tool by name or legacy name.

        Returns (tool, forced_action); forced_action is set only for legacy names.
        """
        tool = self._tools.get(name)
        if tool:
            return tool, None

        legacy = LEGACY_TOOL_ACTIONS.get(name)
        if legacy:
            tool_name, action = legacy
            tool = self._tools.get(tool_name)
            if tool:
                return tool, action

        return None, None

    def get_all_tools(self) -> Dict[str, Tool]:
        return self._tools.copy()

    def names(self) -> list[str]:
        return list(self._tools.keys())

    def get_tool_specs(self) -> list[Dict[str, Any]]:
        """
        Get all tool specs in OpenAI function calling format.
        """
        return [tool.to_openai_spec() for tool in self._tools.values()]

    def __len__(self) -> int:
        return len(self._tools)


def build_registry(settings: Settings, client: Optional[GrowwClient] = None) -> ToolRegistry:
    """
    Register the Groww tools.

    Without a token nothing is registered, so no tool is exposed at all.
    """
    registry = ToolRegistry()
    if not settings.enabled:
        logger.warning("GROWW_API_KEY is not set; no Groww tools will be registered")
        return registry

    client = client or GrowwClient(settings.api_key, settings.base_url)
    for tool in (PortfolioTool(client), OrderTool(client), MarketDataTool(client)):
        registry.register(tool)
    logger.info("Registered Groww tools: {}", ", ".join(registry.names()))
    return registry
