"""Unit tests for translate-then-validate orchestration."""

import pytest

from apertium.config import ClientConfiguration
from apertium.exceptions import ConfigurationError, InvalidPairError, RemoteError
from apertium.orchestrator import TranslationOrchestrator, _snip
from apertium.pair_cache import PairCache

from conftest import FakeTranslationService


def make_orchestrator(service, **config_options):
    config = ClientConfiguration(**config_options)
    return TranslationOrchestrator(config, PairCache(service), service)


class TestTranslate:
    """Tests for TranslationOrchestrator.translate()"""

    @pytest.mark.asyncio
    async def test_valid_pair_delegates_to_service(self, fake_service):
        orchestrator = make_orchestrator(fake_service)

        result = await orchestrator.translate("Hello", "eng", "spa")

        assert result == "Hola"
        assert fake_service.translate_calls == [("Hello", "eng", "spa")]

    @pytest.mark.asyncio
    async def test_invalid_pair_never_reaches_service(self, fake_service):
        orchestrator = make_orchestrator(fake_service)

        with pytest.raises(InvalidPairError) as exc_info:
            await orchestrator.translate("Hello", "deu", "spa")

        assert exc_info.value.from_language == "deu"
        assert exc_info.value.to_language == "spa"
        assert "deu -> spa" in str(exc_info.value)
        assert fake_service.translate_calls == []

    @pytest.mark.asyncio
    async def test_uses_default_languages(self, fake_service):
        orchestrator = make_orchestrator(fake_service)

        assert await orchestrator.translate("Hello") == "Hola"
        assert fake_service.translate_calls == [("Hello", "eng", "spa")]

    @pytest.mark.asyncio
    async def test_explicit_target_uses_default_source(self, fake_service):
        fake_service.pairs.append(("eng", "cat"))
        orchestrator = make_orchestrator(fake_service)

        await orchestrator.translate("Hello", to_language="cat")

        assert fake_service.translate_calls == [("Hello", "eng", "cat")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("from_language, to_language", [("", "spa"), ("eng", "")])
    async def test_empty_language_is_not_replaced_by_default(self, fake_service, from_language, to_language):
        orchestrator = make_orchestrator(fake_service)

        with pytest.raises(InvalidPairError):
            await orchestrator.translate("Hello", from_language, to_language)

        assert fake_service.translate_calls == []

    @pytest.mark.asyncio
    async def test_remote_failure_propagates_unchanged(self, fake_service):
        error = RemoteError("Unexpected error", status=500)
        fake_service.translate_error = error
        orchestrator = make_orchestrator(fake_service)

        with pytest.raises(RemoteError) as exc_info:
            await orchestrator.translate("Hello", "eng", "spa")

        assert exc_info.value is error
        assert len(fake_service.translate_calls) == 1

    @pytest.mark.asyncio
    async def test_validation_populates_cache_once(self, fake_service):
        orchestrator = make_orchestrator(fake_service)

        await orchestrator.translate("Hello", "eng", "spa")
        await orchestrator.translate("Bonjour", "fra", "eng")

        assert fake_service.list_calls == 1


class TestInitialize:
    """Tests for construction-time pair loading."""

    @pytest.mark.asyncio
    async def test_lazy_by_default(self, fake_service):
        await make_orchestrator(fake_service).initialize()

        assert fake_service.list_calls == 0

    @pytest.mark.asyncio
    async def test_auto_load_fetches_pairs(self, fake_service):
        orchestrator = make_orchestrator(fake_service, auto_load_pairs=True)

        await orchestrator.initialize()

        assert fake_service.list_calls == 1
        assert len(orchestrator.cache) == 2

    @pytest.mark.asyncio
    async def test_validate_rejects_missing_default_pair(self):
        service = FakeTranslationService(pairs=[("eng", "spa")])
        orchestrator = make_orchestrator(
            service,
            default_from_language="fra",
            default_to_language="deu",
            validate_default_pair=True,
        )

        with pytest.raises(ConfigurationError, match="fra -> deu"):
            await orchestrator.initialize()

    @pytest.mark.asyncio
    async def test_validate_accepts_listed_default_pair(self, fake_service):
        orchestrator = make_orchestrator(fake_service, validate_default_pair=True)

        await orchestrator.initialize()

        assert fake_service.list_calls == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("options", [
        {"auto_load_pairs": True},
        {"validate_default_pair": True},
    ])
    async def test_empty_pair_list_is_a_configuration_error(self, options):
        orchestrator = make_orchestrator(FakeTranslationService(pairs=[]), **options)

        with pytest.raises(ConfigurationError, match="No valid language pairs"):
            await orchestrator.initialize()


def test_snip_shortens_long_text():
    assert _snip("short\n text") == "short text"
    assert _snip("x" * 100, length=10) == "xxxxxxx..."
