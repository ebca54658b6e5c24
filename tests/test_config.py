"""Tests for configuration helpers and environment settings."""

import pytest

from apertium.config import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT,
    ClientConfiguration,
    get_api_key,
    get_api_url,
    get_default_languages,
    get_timeout,
    normalize_base_url,
)


class TestNormalizeBaseUrl:
    """Tests for normalize_base_url()"""

    def test_adds_missing_slash(self):
        assert normalize_base_url("https://apy.example.org/apy") == "https://apy.example.org/apy/"

    def test_collapses_repeated_slashes(self):
        assert normalize_base_url("https://apy.example.org/apy///") == "https://apy.example.org/apy/"

    def test_keeps_single_slash(self):
        assert normalize_base_url(DEFAULT_API_URL) == DEFAULT_API_URL

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_selects_public_server(self, value):
        assert normalize_base_url(value) == DEFAULT_API_URL


class TestClientConfiguration:
    """Tests for ClientConfiguration"""

    def test_defaults(self):
        config = ClientConfiguration()

        assert config.base_url == DEFAULT_API_URL
        assert config.api_key is None
        assert config.default_pair == ("eng", "spa")
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.eager_load is False

    def test_validation_implies_eager_load(self):
        assert ClientConfiguration(validate_default_pair=True).eager_load is True
        assert ClientConfiguration(auto_load_pairs=True).eager_load is True

    def test_empty_api_key_is_none(self):
        assert ClientConfiguration(api_key="").api_key is None

    def test_set_endpoint_normalizes(self):
        config = ClientConfiguration(api_key="old")

        config.set_endpoint("http://localhost:2737", None)

        assert config.base_url == "http://localhost:2737/"
        assert config.api_key is None


class TestSettings:
    """Environment-backed settings are read on each call."""

    def test_defaults_without_environment(self, monkeypatch):
        for name in ('APERTIUM_API_URL', 'APERTIUM_API_KEY', 'APERTIUM_TIMEOUT',
                     'APERTIUM_FROM_LANGUAGE', 'APERTIUM_TO_LANGUAGE'):
            monkeypatch.delenv(name, raising=False)

        assert get_api_url() == DEFAULT_API_URL
        assert get_api_key() is None
        assert get_timeout() == DEFAULT_TIMEOUT
        assert get_default_languages() == ("eng", "spa")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('APERTIUM_API_URL', 'http://localhost:2737/')
        monkeypatch.setenv('APERTIUM_API_KEY', 'secret')
        monkeypatch.setenv('APERTIUM_TIMEOUT', '5')
        monkeypatch.setenv('APERTIUM_FROM_LANGUAGE', 'cat')
        monkeypatch.setenv('APERTIUM_TO_LANGUAGE', 'oci')

        assert get_api_url() == 'http://localhost:2737/'
        assert get_api_key() == 'secret'
        assert get_timeout() == 5.0
        assert get_default_languages() == ('cat', 'oci')

    @pytest.mark.parametrize("value", ["abc", "-1", "0"])
    def test_invalid_timeout_falls_back(self, monkeypatch, value):
        monkeypatch.setenv('APERTIUM_TIMEOUT', value)

        assert get_timeout() == DEFAULT_TIMEOUT
