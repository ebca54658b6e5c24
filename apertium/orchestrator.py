"""Translate-then-validate orchestration.

Every translation request is checked against the cached pair set before a
remote call is spent on it.
"""
import logging
from typing import Optional

from apertium.config import ClientConfiguration
from apertium.exceptions import ConfigurationError, InvalidPairError
from apertium.pair_cache import PairCache
from apertium.service import RemoteTranslationService

logger = logging.getLogger(__name__)

_MAX_LOG_SNIPPET = 80


def _snip(text: str, length: int = _MAX_LOG_SNIPPET) -> str:
    """Return a compact single-line snippet for logging."""
    cleaned = " ".join(text.split())
    if len(cleaned) <= length:
        return cleaned
    return cleaned[: length - 3] + "..."


class TranslationOrchestrator:
    """Single entry point for translations.

    Validates the requested pair against the PairCache, then delegates to the
    remote service. Remote failures are propagated unchanged.
    """

    def __init__(
        self,
        config: ClientConfiguration,
        cache: PairCache,
        service: RemoteTranslationService
    ):
        self.config = config
        self.cache = cache
        self.service = service

    async def initialize(self) -> None:
        """Run the construction-time pair loading and validation.

        Does nothing unless auto_load_pairs or validate_default_pair is set.

        Raises:
            ConfigurationError: The server lists no pairs, or validation was
                requested and the default pair is not among them
            RemoteError: When fetching the pairs fails
        """
        if not self.config.eager_load:
            return

        pairs = await self.cache.refresh()
        if not pairs:
            raise ConfigurationError("No valid language pairs found.")

        if self.config.validate_default_pair and self.config.default_pair not in pairs:
            from_language, to_language = self.config.default_pair
            raise ConfigurationError(
                f"Invalid default language pair: {from_language} -> {to_language}"
            )

    async def translate(
        self,
        text: str,
        from_language: Optional[str] = None,
        to_language: Optional[str] = None
    ) -> str:
        """Translate text, falling back to the default languages.

        Args:
            text: Text to translate
            from_language: Source language (defaults to default_from_language)
            to_language: Target language (defaults to default_to_language)

        Returns:
            Translated text exactly as returned by the service

        Raises:
            InvalidPairError: Pair is not offered; no remote call is made
            RemoteError: Remote translation failed
        """
        if from_language is None:
            from_language = self.config.default_from_language
        if to_language is None:
            to_language = self.config.default_to_language

        if not await self.cache.is_valid_pair(from_language, to_language):
            logger.debug("Rejected pair %s -> %s", from_language, to_language)
            raise InvalidPairError(from_language, to_language)

        logger.debug("Translating %s -> %s: %s", from_language, to_language, _snip(text))
        return await self.service.translate(text, from_language, to_language)
