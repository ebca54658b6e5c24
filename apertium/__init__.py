"""Client library for the Apertium APy machine-translation API."""

from apertium.client import ApertiumClient, AsyncApertiumClient
from apertium.config import ClientConfiguration, DEFAULT_API_URL
from apertium.exceptions import (
    ApertiumError,
    AuthenticationError,
    ConfigurationError,
    InvalidPairError,
    MalformedResponseError,
    RateLimitError,
    RemoteError,
)
from apertium.http_client import ApertiumHttpService
from apertium.models import LanguagePair
from apertium.pair_cache import PairCache
from apertium.service import RemoteTranslationService

__all__ = [
    'ApertiumClient',
    'AsyncApertiumClient',
    'ApertiumHttpService',
    'ClientConfiguration',
    'DEFAULT_API_URL',
    'LanguagePair',
    'PairCache',
    'RemoteTranslationService',
    # Errors
    'ApertiumError',
    'AuthenticationError',
    'ConfigurationError',
    'InvalidPairError',
    'MalformedResponseError',
    'RateLimitError',
    'RemoteError',
]
