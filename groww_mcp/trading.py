"""
HTTP client for the Groww trading API
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from groww_mcp.config import DEFAULT_BASE_URL

# Left unescaped on top of quote()'s own "_.-~", as a URI component.
COMPONENT_SAFE = "!*'()"


def encode_query(params: Optional[Dict[str, Any]]) -> str:
    """
    Percent-encode every key and value on its own and join them with '&'.

    Entries whose value is None are left out entirely.
    """
    if not params:
        return ""
    parts = [
        f"{quote(str(key), safe=COMPONENT_SAFE)}={quote(str(value), safe=COMPONENT_SAFE)}"
        for key, value in params.items()
        if value is not None
    ]
    return "&".join(parts)


class GrowwClient:
    """
    Thin adapter over the Groww REST API.

    Each call issues exactly one request and returns the raw response body as
    text, whatever the HTTP status. Callers decide what the body means.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def _headers(self, with_body: bool = False) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def build_url(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self._base_url}{path}"
        query = encode_query(params)
        if query:
            url = f"{url}?{query}"
        return url

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = self.build_url(path, params)
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.get(url, headers=self._headers())
        return response.text

    async def post(self, path: str, body: Dict[str, Any]) -> str:
        url = self.build_url(path)
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(
                url,
                headers=self._headers(with_body=True),
                content=json.dumps(body),
            )
        return response.text
