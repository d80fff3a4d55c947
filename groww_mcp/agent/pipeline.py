"""
Response pipeline

Every raw Groww response body goes through two gates before it reaches the
agent: JSON parsing, then validation against the endpoint's response model.
Whatever happens, the caller gets a normal tool result back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Dict, Optional, Type

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from groww_mcp.agent.validation.guard import report_from_validation_error


@dataclass(frozen=True)
class Endpoint:
    """One Groww endpoint as seen by the pipeline"""

    label: str
    schema: Type[BaseModel]
    parse_hint: str
    invalid_hint: str


def text_result(text: str, message: Optional[str] = None) -> Dict[str, Any]:
    result: Dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if message:
        result["message"] = message
    return result


def pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def process_response(endpoint: Endpoint, text: str, success_message: str) -> Dict[str, Any]:
    logger.debug("Groww {} API raw response: {}", endpoint.label, text)

    try:
        data = json.loads(text)
    except ValueError:
        return text_result(
            f"Failed to parse JSON from Groww {endpoint.label} API. Raw response: {text}",
            endpoint.parse_hint,
        )

    try:
        validated = endpoint.schema.model_validate(data)
    except ValidationError as e:
        report = report_from_validation_error(e)
        return text_result(
            f"{endpoint.label} response validation failed:\n{pretty(report)}",
            endpoint.invalid_hint,
        )

    return text_result(
        pretty(validated.model_dump(mode="json", exclude_unset=True)),
        success_message,
    )


async def call_endpoint(endpoint: Endpoint, request: Awaitable[str], success_message: str) -> Dict[str, Any]:
    """Await the HTTP call and push its body through both gates."""
    try:
        text = await request
    except httpx.HTTPError as e:
        logger.warning("Request to Groww {} API failed: {!r}", endpoint.label, e)
        return text_result(
            f"Request to Groww {endpoint.label} API failed: {e!r}",
            "Could not reach Groww. Check your network connection and try again.",
        )
    return process_response(endpoint, text, success_message)
