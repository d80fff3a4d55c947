"""
Base tool classes for the Groww agent tools

Every tool takes a flat JSON object with an `action` discriminator and returns
a tool result: {"content": [{"type": "text", "text": ...}], "message": ...}.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from groww_mcp.agent.pipeline import pretty, text_result
from groww_mcp.agent.validation.contracts import get_contract
from groww_mcp.agent.validation.guard import ErrorReport, guard_tool_call, validate_payload
from groww_mcp.trading import GrowwClient

Handler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


class Tool(ABC):
    """
    Base class for all Groww agent tools.

    Tools are:
    - Stateless (each call is one request/response round-trip)
    - JSON input/output
    - Guarded (inputs are checked before anything is sent)
    """

    name: str
    description: str
    input_schema: Dict[str, Any]
    safety: Dict[str, Any] = {
        "read_only": True,
        "requires_confirmation": False
    }

    @abstractmethod
    async def run(self, **kwargs) -> Dict[str, Any]:
        """
        Execute the tool with given arguments.

        Args:
            **kwargs: Tool arguments matching input_schema

        Returns:
            Tool result dict
        """

    def validate_input(self, **kwargs) -> Tuple[bool, ErrorReport]:
        """
        Validate input arguments against input_schema.

        Returns:
            Tuple of (is_valid, path-keyed error report)
        """
        report = validate_payload(self.input_schema, kwargs)
        return not report, report

    def to_openai_spec(self) -> Dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.input_schema
            }
        }


def handler_name(action: str) -> str:
    """'historical-candle' -> 'handle_historical_candle'"""
    return "handle_" + action.replace("-", "_")


class ActionTool(Tool):
    """
    A tool whose behaviour is selected by its `action` argument.

    Subclasses list their actions and implement one `handle_<action>` coroutine
    per action. A missing handler is an error as soon as the class is defined.
    """

    actions: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        missing = [a for a in cls.actions if not callable(getattr(cls, handler_name(a), None))]
        if missing:
            raise TypeError(f"{cls.__name__} has no handler for action(s): {', '.join(missing)}")

    def __init__(self, client: GrowwClient):
        self.client = client

    def handlers(self) -> Dict[str, Handler]:
        return {action: getattr(self, handler_name(action)) for action in self.actions}

    def unsupported(self, action: Any) -> Dict[str, Any]:
        supported = ", ".join(self.actions)
        return text_result(
            f"Unsupported action {action!r} for {self.name} tool. Supported actions: {supported}.",
            f"Supported actions: {supported}.",
        )

    def guard(self, action: str, args: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """
        Check the action contract.

        Returns (payload with defaults, None) when the call may proceed, or
        (None, guidance result) when it must not.
        """
        contract = get_contract(self.name, action) or {"type": "object", "properties": {}}
        verdict = guard_tool_call(f"{self.name}:{action}", contract, args)
        if verdict["action"] == "ASK_USER":
            missing = verdict["missing_fields"]
            return None, text_result(
                verdict["message"],
                f"Please provide {', '.join(missing)}.",
            )
        if verdict["action"] == "ASK_USER_INVALID":
            return None, text_result(
                f"Invalid input for {self.name} action={action}:\n{pretty(verdict['invalid_fields'])}",
                verdict["message"],
            )
        return verdict["payload"], None

    async def run(self, **kwargs) -> Dict[str, Any]:
        action = kwargs.get("action")
        handler = self.handlers().get(action) if isinstance(action, str) else None
        if handler is None:
            return self.unsupported(action)

        is_valid, report = self.validate_input(**kwargs)
        if not is_valid:
            return text_result(
                f"Invalid input for {self.name} tool:\n{pretty(report)}",
                "Some parameters are invalid. Please correct them and try again.",
            )

        return await handler(kwargs)
