"""
Validation + tool contracts for the Groww tools.

This package is the single source of truth for:
- Enumerated value sets and the flat tool input JSON Schemas
- Per-action contracts (required fields, defaults)
- Response models for every Groww endpoint
- Guardrails that stop a request from being sent with missing/invalid parameters
"""
