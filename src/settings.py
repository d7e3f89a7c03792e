"""Runtime configuration read from the environment (and a local `.env`).

Variables
- MOVIES_API_URL: collection endpoint (default http://localhost:3000/movies)
- MOVIES_TIMEOUT: per-request timeout in seconds
- MOVIES_MAX_RETRIES: adapter retries for GET only (default 0, no retries)
- MOVIES_ERROR_SECONDS: how long an error stays visible in the UI
- LOG_LEVEL / LOG_FILE: logging setup
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:3000/movies"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = 10.0
    max_retries: int = 0
    error_seconds: float = 5.0
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_settings() -> Settings:
    """Build `Settings` from the environment, loading `.env` first."""
    load_dotenv()
    return Settings(
        api_url=(os.environ.get("MOVIES_API_URL") or DEFAULT_API_URL).rstrip("/"),
        timeout=_env_float("MOVIES_TIMEOUT", 10.0),
        max_retries=max(0, _env_int("MOVIES_MAX_RETRIES", 0)),
        error_seconds=_env_float("MOVIES_ERROR_SECONDS", 5.0),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        log_file=os.environ.get("LOG_FILE") or None,
    )
