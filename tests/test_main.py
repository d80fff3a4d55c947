import pytest
from fastapi.testclient import TestClient

from groww_mcp import __version__
from groww_mcp.agent.tool_registry import build_registry
from groww_mcp.config import Settings
from groww_mcp.main import create_app


@pytest.fixture
def api(settings, registry):
    return TestClient(create_app(settings, registry))


def test_root(api):
    response = api.get("/")
    assert response.status_code == 200
    assert response.json() == {
        "name": "groww-mcp-server",
        "version": __version__,
        "tools": ["portfolio", "order", "market-data"],
    }


def test_list_tools(api):
    specs = api.get("/api/tools").json()
    assert [s["function"]["name"] for s in specs] == ["portfolio", "order", "market-data"]
    assert specs[1]["function"]["parameters"]["required"] == ["action"]


def test_call_tool(api, groww):
    groww.reply("/v1/live-data/ltp", {"status": "SUCCESS", "payload": {"NSE_HFCL": 98.2}})
    response = api.post("/api/tools/market-data", json={"action": "ltp", "trading_symbols": ["HFCL"]})

    assert response.status_code == 200
    body = response.json()
    assert '"NSE_HFCL": 98.2' in body["content"][0]["text"]
    assert body["message"]


def test_call_legacy_tool(api, groww):
    response = api.post("/api/tools/get-order-status", json={"segment": "CASH"})
    assert response.status_code == 200
    assert response.json()["content"][0]["text"] == "groww_order_id is required."
    assert groww.requests == []


def test_call_tool_without_body(api):
    response = api.post("/api/tools/order")
    assert response.status_code == 200
    assert "Supported actions" in response.json()["content"][0]["text"]


def test_unknown_tool_is_404(api):
    response = api.post("/api/tools/withdraw", json={})
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown tool: withdraw"


def test_app_without_token_has_no_tools():
    settings = Settings(api_key=None)
    api = TestClient(create_app(settings, build_registry(settings)))
    assert api.get("/").json()["tools"] == []
    assert api.get("/api/tools").json() == []
    assert api.post("/api/tools/portfolio", json={"action": "get"}).status_code == 404
