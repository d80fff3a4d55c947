"""
Guard layer: missing-info detection, defaults and schema validation.

This runs BEFORE any request reaches Groww. If required information is missing
or invalid, the handler returns a guidance result instead of calling the API.

Every validator here reports problems the same way: a mapping of dotted field
path to the list of messages for that path, covering all failures.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Tuple

from jsonschema import Draft7Validator
from pydantic import ValidationError

ErrorReport = Dict[str, List[str]]

ROOT_PATH = "(root)"


def _is_missing(value: Any) -> bool:
    return value is None or value == "" or value == []


def detect_missing_fields(schema: dict, payload: dict) -> List[str]:
    required = schema.get("required", [])
    return [field for field in required if _is_missing(payload.get(field))]


def apply_defaults(schema: dict, payload: dict) -> dict:
    """Fill top-level schema defaults for fields that are absent or null"""
    result = dict(payload)
    for field, spec in schema.get("properties", {}).items():
        if "default" in spec and result.get(field) is None:
            result[field] = copy.deepcopy(spec["default"])
    return result


def _path_key(parts) -> str:
    path = ".".join(str(p) for p in parts)
    return path or ROOT_PATH


def validate_payload(schema: dict, payload: Any) -> ErrorReport:
    """Validate against a JSON Schema; an empty report means valid."""
    report: ErrorReport = {}
    validator = Draft7Validator(schema)
    for err in sorted(validator.iter_errors(payload), key=lambda e: list(map(str, e.path))):
        report.setdefault(_path_key(err.path), []).append(err.message)
    return report


def report_from_validation_error(exc: ValidationError) -> ErrorReport:
    report: ErrorReport = {}
    for err in exc.errors():
        report.setdefault(_path_key(err["loc"]), []).append(err["msg"])
    return report


def join_fields(fields: List[str]) -> str:
    """['a', 'b', 'c'] -> 'a, b and c'"""
    if len(fields) <= 1:
        return "".join(fields)
    return f"{', '.join(fields[:-1])} and {fields[-1]}"


def guard_tool_call(intent: str, schema: dict, payload: dict) -> Dict[str, Any]:
    """
    Guard result protocol:
    - action == "PROCEED": safe to call the API; "payload" carries defaults
    - action == "ASK_USER": missing required fields; handler must not call the API
    - action == "ASK_USER_INVALID": invalid fields; handler must not call the API
    """
    prepared = apply_defaults(schema, payload)

    missing = detect_missing_fields(schema, prepared)
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        return {
            "action": "ASK_USER",
            "intent": intent,
            "missing_fields": missing,
            "message": f"{join_fields(missing)} {verb} required.",
        }

    report = validate_payload(schema, prepared)
    if report:
        return {
            "action": "ASK_USER_INVALID",
            "intent": intent,
            "invalid_fields": report,
            "message": "Some parameters are invalid. Please correct them and try again.",
        }

    return {"action": "PROCEED", "intent": intent, "payload": prepared}
