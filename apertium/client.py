"""Apertium clients: the asynchronous core and its blocking adapter.

AsyncApertiumClient owns the configuration, the pair cache and the
orchestrator. ApertiumClient runs the same coroutines to completion on a
private event loop for callers without one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Optional, TypeVar

import httpx

from apertium.config import (
    DEFAULT_API_URL,
    DEFAULT_FROM_LANGUAGE,
    DEFAULT_TIMEOUT,
    DEFAULT_TO_LANGUAGE,
    ClientConfiguration,
)
from apertium.http_client import ApertiumHttpService, _redact_token
from apertium.models import LanguagePair
from apertium.orchestrator import TranslationOrchestrator
from apertium.pair_cache import PairCache
from apertium.service import RemoteTranslationService

logger = logging.getLogger(__name__)

T = TypeVar('T')


class AsyncApertiumClient:
    """Asynchronous Apertium client.

    Construct with ``await AsyncApertiumClient.create(...)`` to run the
    auto-load / default-pair validation; the plain constructor performs no I/O.
    Pair queries populate the cache on first use.
    """

    def __init__(
        self,
        base_url: Optional[str] = DEFAULT_API_URL,
        api_key: Optional[str] = None,
        auto_load_pairs: bool = False,
        default_from_language: str = DEFAULT_FROM_LANGUAGE,
        default_to_language: str = DEFAULT_TO_LANGUAGE,
        validate_default_pair: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        service: Optional[RemoteTranslationService] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client.

        Args:
            base_url: APy base URL (defaults to the public Apertium server)
            api_key: Optional API key sent with every request
            auto_load_pairs: Fetch the pair list during create()
            default_from_language: Source language used when none is given
            default_to_language: Target language used when none is given
            validate_default_pair: Fail create() unless the default pair is
                offered by the server (implies auto_load_pairs)
            timeout: HTTP timeout in seconds
            service: Replacement for the HTTP service (e.g. a test double)
            http_client: Preconfigured httpx client for the HTTP service
        """
        self.config = ClientConfiguration(
            base_url=base_url,
            api_key=api_key,
            default_from_language=default_from_language,
            default_to_language=default_to_language,
            auto_load_pairs=auto_load_pairs,
            validate_default_pair=validate_default_pair,
            timeout=timeout,
        )

        self._http_service: Optional[ApertiumHttpService] = None
        if service is None:
            self._http_service = ApertiumHttpService(self.config, http_client)
            service = self._http_service

        self.service = service
        self.cache = PairCache(service)
        self.orchestrator = TranslationOrchestrator(self.config, self.cache, service)

    @classmethod
    async def create(cls, *args: Any, **kwargs: Any) -> AsyncApertiumClient:
        """Create a client and run its construction-time pair validation.

        Raises:
            ConfigurationError: Default pair validation failed
            RemoteError: Fetching the pair list failed
        """
        client = cls(*args, **kwargs)
        try:
            await client.orchestrator.initialize()
        except BaseException:
            await client.aclose()
            raise
        return client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Release the HTTP transport owned by this client"""
        if self._http_service is not None:
            await self._http_service.aclose()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key

    @property
    def default_from_language(self) -> str:
        return self.config.default_from_language

    @property
    def default_to_language(self) -> str:
        return self.config.default_to_language

    @property
    def from_mapping(self) -> dict[str, list[str]]:
        """Cached source -> targets mapping (copy, no fetch)."""
        return self.cache.from_mapping

    @property
    def to_mapping(self) -> dict[str, list[str]]:
        """Cached target -> sources mapping (copy, no fetch)."""
        return self.cache.to_mapping

    async def translate(
        self,
        text: str,
        from_language: Optional[str] = None,
        to_language: Optional[str] = None
    ) -> str:
        """Translate text; see TranslationOrchestrator.translate."""
        return await self.orchestrator.translate(text, from_language, to_language)

    async def refresh_pairs(self) -> set[LanguagePair]:
        return await self.cache.refresh()

    async def get_pairs(self, force_refresh: bool = False) -> set[LanguagePair]:
        return await self.cache.get_pairs(force_refresh)

    async def is_valid_pair(
        self,
        from_language: str,
        to_language: str,
        force_refresh: bool = False
    ) -> bool:
        return await self.cache.is_valid_pair(from_language, to_language, force_refresh)

    async def get_targets_for(self, from_language: str, force_refresh: bool = False) -> list[str]:
        return await self.cache.get_targets_for(from_language, force_refresh)

    async def get_sources_for(self, to_language: str, force_refresh: bool = False) -> list[str]:
        return await self.cache.get_sources_for(to_language, force_refresh)

    async def is_valid_source_language(self, language: str, force_refresh: bool = False) -> bool:
        return await self.cache.is_valid_source_language(language, force_refresh)

    async def is_valid_target_language(self, language: str, force_refresh: bool = False) -> bool:
        return await self.cache.is_valid_target_language(language, force_refresh)

    async def update_default_languages(self, from_language: str, to_language: str) -> bool:
        """Change the default pair if the server offers it.

        Returns:
            True if the defaults were updated, False if the pair is invalid
            and the previous defaults were kept
        """
        if not await self.cache.is_valid_pair(from_language, to_language):
            logger.warning(
                "Keeping default pair %s -> %s; %s -> %s is not offered",
                self.config.default_from_language,
                self.config.default_to_language,
                from_language,
                to_language,
            )
            return False

        self.config.set_default_languages(from_language, to_language)
        logger.info("Default pair set to %s -> %s", from_language, to_language)
        return True

    def update_endpoint(self, base_url: Optional[str], api_key: Optional[str] = None) -> None:
        """Point the client at another server and drop its cached pairs."""
        self.config.set_endpoint(base_url, api_key)
        self.cache.clear()
        logger.info(
            "Endpoint set to %s (key=%s); pair cache cleared",
            self.config.base_url,
            _redact_token(self.config.api_key),
        )

    def clear_cache(self) -> None:
        self.cache.clear()


class ApertiumClient:
    """Blocking Apertium client.

    Wraps an AsyncApertiumClient and drives it on a private event loop. Each
    call blocks until the underlying coroutine finishes and re-raises its
    failure unchanged. Construction runs the auto-load / default-pair
    validation, so a bad default pair fails here.

    Not usable from inside a running event loop; use AsyncApertiumClient there.
    The event loop and the HTTP transport are released only by close() or by
    leaving a ``with`` block, so call one of them when done with the client.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        """Initialize the client.

        Accepts the same arguments as AsyncApertiumClient.

        Raises:
            ConfigurationError: Default pair validation failed
            RemoteError: Fetching the pair list failed
        """
        self.async_client = AsyncApertiumClient(*args, **kwargs)
        self._loop = asyncio.new_event_loop()
        try:
            self._run(self.async_client.orchestrator.initialize())
        except BaseException:
            self.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP transport and the private event loop"""
        if self._loop.is_closed():
            return
        try:
            self._loop.run_until_complete(self.async_client.aclose())
        finally:
            self._loop.close()

    def _run(self, coro: Coroutine[Any, Any, T]) -> T:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> ClientConfiguration:
        return self.async_client.config

    @property
    def base_url(self) -> str:
        return self.async_client.base_url

    @property
    def api_key(self) -> Optional[str]:
        return self.async_client.api_key

    @property
    def default_from_language(self) -> str:
        return self.async_client.default_from_language

    @property
    def default_to_language(self) -> str:
        return self.async_client.default_to_language

    @property
    def from_mapping(self) -> dict[str, list[str]]:
        return self.async_client.from_mapping

    @property
    def to_mapping(self) -> dict[str, list[str]]:
        return self.async_client.to_mapping

    def translate(
        self,
        text: str,
        from_language: Optional[str] = None,
        to_language: Optional[str] = None
    ) -> str:
        return self._run(self.async_client.translate(text, from_language, to_language))

    def refresh_pairs(self) -> set[LanguagePair]:
        return self._run(self.async_client.refresh_pairs())

    def get_pairs(self, force_refresh: bool = False) -> set[LanguagePair]:
        return self._run(self.async_client.get_pairs(force_refresh))

    def is_valid_pair(self, from_language: str, to_language: str, force_refresh: bool = False) -> bool:
        return self._run(self.async_client.is_valid_pair(from_language, to_language, force_refresh))

    def get_targets_for(self, from_language: str, force_refresh: bool = False) -> list[str]:
        return self._run(self.async_client.get_targets_for(from_language, force_refresh))

    def get_sources_for(self, to_language: str, force_refresh: bool = False) -> list[str]:
        return self._run(self.async_client.get_sources_for(to_language, force_refresh))

    def is_valid_source_language(self, language: str, force_refresh: bool = False) -> bool:
        return self._run(self.async_client.is_valid_source_language(language, force_refresh))

    def is_valid_target_language(self, language: str, force_refresh: bool = False) -> bool:
        return self._run(self.async_client.is_valid_target_language(language, force_refresh))

    def update_default_languages(self, from_language: str, to_language: str) -> bool:
        return self._run(self.async_client.update_default_languages(from_language, to_language))

    def update_endpoint(self, base_url: Optional[str], api_key: Optional[str] = None) -> None:
        self.async_client.update_endpoint(base_url, api_key)

    def clear_cache(self) -> None:
        self.async_client.clear_cache()
