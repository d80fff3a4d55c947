"""
Agent tool-invocation server.

Publishes the Groww tools over the MCP stdio transport (or, with
`--transport http`, through the FastAPI app in `groww_mcp.main`).
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Any, Dict, List, Optional

import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from groww_mcp import __version__
from groww_mcp.agent.tool_registry import ToolRegistry, build_registry
from groww_mcp.agent.tool_router import execute_tool
from groww_mcp.config import Settings, get_settings
from groww_mcp.log import setup_logging

SERVER_NAME = "groww-mcp-server"


def to_text_contents(result: Dict[str, Any]) -> List[types.TextContent]:
    """
    Map a tool result onto MCP content.

    MCP results have no slot for the advisory message, so it follows the
    result text as a second text item.
    """
    contents = [
        types.TextContent(type="text", text=item["text"])
        for item in result.get("content", [])
        if item.get("type") == "text"
    ]
    message = result.get("message")
    if message:
        contents.append(types.TextContent(type="text", text=message))
    return contents


def build_server(registry: ToolRegistry) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in registry.get_all_tools().values()
        ]

    # Tools check their own input, so unknown actions still get a guidance result.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await execute_tool(registry, name, arguments or {})
        return to_text_contents(result)

    return server


async def serve_stdio(settings: Settings) -> None:
    server = build_server(build_registry(settings))
    logger.info("Starting {} {} on stdio", SERVER_NAME, __version__)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="groww-mcp", description="Groww trading tools for AI agents")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio (MCP, default) or http (FastAPI)",
    )
    args = parser.parse_args(argv)

    settings = get_settings(load_env=True)
    setup_logging(settings.log_level)

    if args.transport == "http":
        from groww_mcp.main import serve_http

        serve_http(settings)
    else:
        asyncio.run(serve_stdio(settings))


if __name__ == "__main__":
    main()
