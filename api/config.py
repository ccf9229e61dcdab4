"""
Quiz API configuration.
Reads settings from environment variables (.env file).
"""

import math
import os

DEFAULT_API_URL = "https://satquiz.onrender.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_WEB_PORT = 5000


def get_api_url() -> str:
    """
    Base URL of the quiz API, without a trailing slash.

    Environment variables:
        QUIZ_API_URL  - e.g. 'http://localhost:8000' for a local server
    """
    url = os.environ.get("QUIZ_API_URL", "").strip()
    return (url or DEFAULT_API_URL).rstrip("/")


def _read_number(name: str, default, cast):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        print(f"  Warning: Invalid {name}={raw!r}, using {default}")
        return default
    if not math.isfinite(value) or value <= 0:
        print(f"  Warning: {name} must be a positive number, using {default}")
        return default
    return value


def get_request_timeout() -> float:
    """Seconds to wait for the quiz API (QUIZ_API_TIMEOUT)."""
    return _read_number("QUIZ_API_TIMEOUT", DEFAULT_TIMEOUT, float)


def get_web_port() -> int:
    """Port for the web interface (QUIZ_WEB_PORT)."""
    return _read_number("QUIZ_WEB_PORT", DEFAULT_WEB_PORT, int)
