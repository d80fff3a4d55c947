from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException

from groww_mcp import __version__
from groww_mcp.agent.tool_registry import ToolRegistry, build_registry
from groww_mcp.agent.tool_router import execute_tool
from groww_mcp.config import Settings, get_settings


def create_app(settings: Optional[Settings] = None, registry: Optional[ToolRegistry] = None) -> FastAPI:
    settings = settings or get_settings()
    registry = registry if registry is not None else build_registry(settings)

    app = FastAPI(title="Groww MCP", version=__version__)
    app.state.registry = registry

    @app.get("/")
    async def root():
        return {
            "name": "groww-mcp-server",
            "version": __version__,
            "tools": registry.names(),
        }

    @app.get("/api/tools", response_model=List[dict])
    async def list_tools():
        """Tool specs in OpenAI function calling format"""
        return registry.get_tool_specs()

    @app.post("/api/tools/{tool_name}")
    async def call_tool(tool_name: str, arguments: Optional[Dict[str, Any]] = Body(default=None)):
        """Execute a tool; the body is the tool's argument object"""
        tool, _ = registry.resolve(tool_name)
        if not tool:
            raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")
        return await execute_tool(registry, tool_name, arguments or {})

    return app


def serve_http(settings: Settings) -> None:
    import uvicorn

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())
