"""
Tool Router

Routes tool execution requests to the appropriate tool. This is the execution
layer that sits between the calling agent and the tools.
"""

from typing import Any, Dict, Optional

from loguru import logger

from groww_mcp.agent.pipeline import text_result
from groww_mcp.agent.tool_registry import ToolRegistry


async def execute_tool(
    registry: ToolRegistry,
    tool_name: str,
    tool_args: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Execute a tool by name with given arguments.

    Args:
        registry: Tools available to the caller
        tool_name: Name of the tool to execute (legacy names accepted)
        tool_args: Arguments for the tool

    Returns:
        Tool result dict; this never raises
    """
    tool_args = dict(tool_args or {})

    tool, forced_action = registry.resolve(tool_name)
    if not tool:
        available = ", ".join(registry.names()) or "none"
        return text_result(
            f"Unknown tool: {tool_name}. Available tools: {available}",
            "Call one of the available tools instead.",
        )

    if forced_action:
        tool_args["action"] = forced_action

    try:
        return await tool.run(**tool_args)
    except Exception as e:
        logger.exception("Tool {} failed", tool.name)
        return text_result(
            f"Tool execution failed: {e}",
            "An unexpected error occurred. Please try again.",
        )
