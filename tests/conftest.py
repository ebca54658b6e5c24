"""Shared fixtures: an in-memory stand-in for the remote translation service."""

import asyncio

import pytest

from apertium.models import LanguagePair

SAMPLE_PAIRS = [("eng", "spa"), ("fra", "eng")]


class FakeTranslationService:
    """RemoteTranslationService double that records every call."""

    def __init__(self, pairs=None, translations=None):
        self.pairs = list(pairs if pairs is not None else SAMPLE_PAIRS)
        self.translations = dict(translations or {})
        self.list_calls = 0
        self.translate_calls = []
        self.list_error = None
        self.translate_error = None

    async def list_pairs(self):
        self.list_calls += 1
        if self.list_error:
            raise self.list_error
        return [LanguagePair(source, target) for source, target in self.pairs]

    async def translate(self, text, from_language, to_language):
        self.translate_calls.append((text, from_language, to_language))
        if self.translate_error:
            raise self.translate_error
        return self.translations.get(
            (text, from_language, to_language),
            f"{text} [{from_language}->{to_language}]"
        )


@pytest.fixture
def fake_service():
    """Service listing eng->spa and fra->eng, translating Hello to Hola."""
    return FakeTranslationService(translations={("Hello", "eng", "spa"): "Hola"})


class GatedTranslationService(FakeTranslationService):
    """Service whose list_pairs() waits until the test opens the gate."""

    def __init__(self, pairs=None):
        super().__init__(pairs=pairs)
        self.gate = asyncio.Event()
        self.started = asyncio.Event()

    async def list_pairs(self):
        self.started.set()
        await self.gate.wait()
        return await super().list_pairs()
