"""
Runtime configuration.

Values come from the process environment (a local `.env` file is loaded by the
entrypoints). The Groww token is read once here and handed to the HTTP client;
nothing else looks it up.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.groww.in"


@dataclass
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def enabled(self) -> bool:
        """Tools are only exposed when a token is configured"""
        return bool(self.api_key)


def get_settings(load_env: bool = False) -> Settings:
    if load_env:
        load_dotenv()
    return Settings(
        api_key=os.getenv("GROWW_API_KEY") or None,
        base_url=os.getenv("GROWW_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        log_level=os.getenv("GROWW_LOG_LEVEL", "INFO").upper(),
        host=os.getenv("GROWW_HTTP_HOST", "127.0.0.1"),
        port=int(os.getenv("GROWW_HTTP_PORT", "8000")),
    )
