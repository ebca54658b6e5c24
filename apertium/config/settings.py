"""Environment-based settings and runtime configuration.

All settings that depend on environment variables. Values are read on each
call so a .env file loaded after import still applies.
"""
import os
from typing import Optional

from apertium.config.constants import (
    DEFAULT_API_URL,
    DEFAULT_FROM_LANGUAGE,
    DEFAULT_TO_LANGUAGE,
)

DEFAULT_TIMEOUT = 30.0  # seconds


def get_api_url() -> str:
    """Return APERTIUM_API_URL, or the public server when unset."""
    return os.getenv('APERTIUM_API_URL', '').strip() or DEFAULT_API_URL


def get_api_key() -> Optional[str]:
    return os.getenv('APERTIUM_API_KEY', '').strip() or None


def get_timeout() -> float:
    """Return APERTIUM_TIMEOUT in seconds, falling back on invalid values."""
    raw = os.getenv('APERTIUM_TIMEOUT', '').strip()
    try:
        timeout = float(raw) if raw else DEFAULT_TIMEOUT
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_default_languages() -> tuple[str, str]:
    """Return (APERTIUM_FROM_LANGUAGE, APERTIUM_TO_LANGUAGE) with eng/spa defaults."""
    from_language = os.getenv('APERTIUM_FROM_LANGUAGE', '').strip() or DEFAULT_FROM_LANGUAGE
    to_language = os.getenv('APERTIUM_TO_LANGUAGE', '').strip() or DEFAULT_TO_LANGUAGE
    return from_language, to_language
