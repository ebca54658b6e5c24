"""Remote translation service interface.

The pair cache and the orchestrator depend only on this protocol, so any
transport implementing it (the APy HTTP service, an in-memory test double)
can be plugged into a client.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from apertium.models import LanguagePair


@runtime_checkable
class RemoteTranslationService(Protocol):
    """Protocol for services that list language pairs and translate text."""

    async def list_pairs(self) -> list[LanguagePair]:
        """Fetch every (source, target) pair the service supports.

        Raises:
            RemoteError: On transport failure or an error response
        """
        ...

    async def translate(self, text: str, from_language: str, to_language: str) -> str:
        """Translate text from one language to another.

        Raises:
            RemoteError: On transport failure, an error response, or a
                missing translation in the payload
        """
        ...


__all__ = ["RemoteTranslationService"]
