"""Client configuration model.

Holds the endpoint, credentials and default translation direction of a client.
"""
from dataclasses import dataclass
from typing import Optional

from apertium.config.constants import (
    DEFAULT_API_URL,
    DEFAULT_FROM_LANGUAGE,
    DEFAULT_TO_LANGUAGE,
)
from apertium.config.settings import DEFAULT_TIMEOUT


def normalize_base_url(base_url: Optional[str]) -> str:
    """Return base_url with exactly one trailing slash.

    Args:
        base_url: APy base URL; empty or None selects the public server

    Returns:
        Normalized base URL
    """
    url = (base_url or '').strip()
    if not url:
        return DEFAULT_API_URL
    return url.rstrip('/') + '/'


@dataclass
class ClientConfiguration:
    """Endpoint, credentials and default languages of one client.

    The base URL is normalized on construction and on every endpoint update.
    """

    base_url: str = DEFAULT_API_URL
    api_key: Optional[str] = None
    default_from_language: str = DEFAULT_FROM_LANGUAGE
    default_to_language: str = DEFAULT_TO_LANGUAGE
    auto_load_pairs: bool = False
    validate_default_pair: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.base_url = normalize_base_url(self.base_url)
        self.api_key = self.api_key or None

    @property
    def eager_load(self) -> bool:
        """True when pairs must be fetched while the client is constructed."""
        return self.auto_load_pairs or self.validate_default_pair

    @property
    def default_pair(self) -> tuple[str, str]:
        return (self.default_from_language, self.default_to_language)

    def set_endpoint(self, base_url: Optional[str], api_key: Optional[str] = None) -> None:
        """Replace endpoint and credentials."""
        self.base_url = normalize_base_url(base_url)
        self.api_key = api_key or None

    def set_default_languages(self, from_language: str, to_language: str) -> None:
        self.default_from_language = from_language
        self.default_to_language = to_language
