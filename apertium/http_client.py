"""Apertium APy HTTP client.

This module implements RemoteTranslationService over the APy REST API.
Uses httpx.AsyncClient for timeout/connection handling and maps HTTP and
envelope errors onto the client's exception hierarchy.
"""
import logging
from typing import Any, Optional

import httpx

from apertium.config import (
    LIST_PAIRS_PATH,
    RESPONSE_STATUS_MESSAGES,
    RESPONSE_STATUS_OK,
    RESPONSE_STATUS_TRAFFIC_LIMIT,
    TRANSLATE_PATH,
    ClientConfiguration,
)
from apertium.exceptions import (
    AuthenticationError,
    MalformedResponseError,
    RateLimitError,
    RemoteError,
)
from apertium.models import LanguagePair

logger = logging.getLogger(__name__)

# Suppress httpx request logs, the API key travels in the query string
logging.getLogger('httpx').setLevel(logging.ERROR)


def _redact_token(token: Optional[str]) -> str:
    """Redact API key for safe logging.

    Args:
        token: API key to redact

    Returns:
        Redacted key string
    """
    if not token:
        return "[EMPTY]"
    if len(token) <= 8:
        return "****"
    return f"{token[:4]}...{token[-4:]}"


class ApertiumHttpService:
    """APy client speaking the listPairs and translate endpoints.

    Features:
    - Connection pooling via httpx
    - Typed exceptions for HTTP and APy envelope errors
    - Endpoint and API key read from a shared ClientConfiguration, so
      endpoint updates take effect on the next request

    Remote errors are never retried here.
    """

    def __init__(
        self,
        config: ClientConfiguration,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """Initialize the service.

        Args:
            config: Client configuration holding base URL, key and timeout
            http_client: Preconfigured httpx client; when given, the caller
                keeps ownership and it is not closed by aclose()
        """
        self.config = config
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout)
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the HTTP client and release connections"""
        if self._owns_client:
            await self.client.aclose()

    def _params(self, **params: str) -> dict[str, str]:
        if self.config.api_key:
            params = {'key': self.config.api_key, **params}
        return params

    async def _get(self, path: str, params: dict[str, str]) -> httpx.Response:
        """Send a GET request relative to the configured base URL."""
        url = f"{self.config.base_url}{path}"
        logger.debug("GET %s (key=%s)", url, _redact_token(self.config.api_key))
        try:
            return await self.client.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.error("Request timeout after %.1fs: %s", self.config.timeout, url)
            raise RemoteError(f"Request timeout: {exc}") from exc
        except httpx.TransportError as exc:
            logger.error("Network error calling %s: %s", url, exc)
            raise RemoteError(f"Network error: {exc}") from exc

    def _handle_response(self, response: httpx.Response) -> dict:
        """Parse and validate an APy response.

        Args:
            response: httpx Response object

        Returns:
            Parsed JSON envelope

        Raises:
            AuthenticationError: Invalid API key
            RateLimitError: Traffic limit exceeded
            MalformedResponseError: Empty body, invalid JSON, or not an object
            RemoteError: Other HTTP or APy errors
        """
        if response.status_code in (401, 403):
            raise AuthenticationError("Invalid Apertium API key", status=response.status_code)

        if response.status_code == 429:
            raise RateLimitError("Rate limit exceeded. Try again later.", status=429)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteError(f"API request failed: {e}", status=response.status_code) from e

        if not response.content or not response.content.strip():
            raise MalformedResponseError("Empty response from server.")

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Invalid JSON response from server: {e}"
            ) from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Unexpected response format: {type(payload).__name__}"
            )

        self._check_envelope_status(payload)
        return payload

    def _check_envelope_status(self, payload: dict) -> None:
        """Raise for a non-200 APy responseStatus inside a 2xx response."""
        status = payload.get('responseStatus')
        if status is None or status == RESPONSE_STATUS_OK:
            return

        message = RESPONSE_STATUS_MESSAGES.get(status, "Error parsing response")
        details = payload.get('responseDetails')
        if details:
            message = f"{message}. Details: {details}"

        if status == RESPONSE_STATUS_TRAFFIC_LIMIT:
            raise RateLimitError(message, status=status)
        raise RemoteError(message, status=status)

    async def list_pairs(self) -> list[LanguagePair]:
        """Fetch the language pairs offered by the server.

        Returns:
            Pairs in the order the server lists them

        Raises:
            RemoteError: On transport or API errors
            MalformedResponseError: When responseData is not a pair list
        """
        response = await self._get(LIST_PAIRS_PATH, self._params())
        payload = self._handle_response(response)

        data = payload.get('responseData')
        if not isinstance(data, list):
            raise MalformedResponseError(f"Invalid JSON response from server: {payload}")

        pairs = [self._parse_pair(entry) for entry in data]
        logger.debug("Server lists %d language pairs", len(pairs))
        return pairs

    def _parse_pair(self, entry: Any) -> LanguagePair:
        """Extract a LanguagePair from a listPairs entry."""
        if isinstance(entry, dict):
            source = entry.get('sourceLanguage')
            target = entry.get('targetLanguage')
            if isinstance(source, str) and source and isinstance(target, str) and target:
                return LanguagePair(source, target)
        raise MalformedResponseError(f"Invalid language pair entry: {entry!r}")

    async def translate(self, text: str, from_language: str, to_language: str) -> str:
        """Translate text with a single APy request.

        Args:
            text: Text to translate
            from_language: Source language code (e.g., "eng")
            to_language: Target language code (e.g., "spa")

        Returns:
            Translated text as returned by the server

        Raises:
            RemoteError: On transport or API errors
            MalformedResponseError: When no translated text is present
        """
        params = self._params(q=text, langpair=f"{from_language}|{to_language}")
        response = await self._get(TRANSLATE_PATH, params)
        payload = self._handle_response(response)

        data = payload.get('responseData')
        if not isinstance(data, dict) or 'translatedText' not in data:
            raise MalformedResponseError(f"Invalid JSON response from server: {payload}")

        translated = data['translatedText']
        if not isinstance(translated, str) or not translated.strip():
            raise MalformedResponseError("Empty translated text in response.")

        return translated
