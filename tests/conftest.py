"""
pytest conftest for the Groww tool suite.

No test talks to the real Groww API: `FakeGroww` is mounted as an
httpx.MockTransport, records every request and replies with canned bodies.
Async tests carry @pytest.mark.asyncio explicitly (strict mode).
"""

import json

import httpx
import pytest

from groww_mcp.agent.tool_registry import build_registry
from groww_mcp.config import Settings
from groww_mcp.trading import GrowwClient

TEST_TOKEN = "test-token"
BASE_URL = "https://api.groww.in"


class FakeGroww:
    """Stands in for api.groww.in"""

    def __init__(self):
        self.requests = []
        self.responses = {}
        self.default = (200, json.dumps({"status": "SUCCESS"}))

    def reply(self, path, body, status_code=200):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.responses[path] = (status_code, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, text = self.responses.get(request.url.path, self.default)
        return httpx.Response(status_code, text=text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


def result_text(result: dict) -> str:
    assert len(result["content"]) == 1
    assert result["content"][0]["type"] == "text"
    return result["content"][0]["text"]


@pytest.fixture
def groww():
    return FakeGroww()


@pytest.fixture
def client(groww):
    return GrowwClient(TEST_TOKEN, BASE_URL, transport=httpx.MockTransport(groww.handler))


@pytest.fixture
def settings():
    return Settings(api_key=TEST_TOKEN, base_url=BASE_URL)


@pytest.fixture
def registry(settings, client):
    return build_registry(settings, client=client)
