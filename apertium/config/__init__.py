"""Centralized configuration for the Apertium client.

Package structure:
- settings.py: Environment-based configuration (endpoint, API key, timeout, languages)
- constants.py: Static constants (request paths, APy status messages)
- models.py: ClientConfiguration and base URL normalization

All exports are re-exported here.
"""

# Re-export environment settings
from apertium.config.settings import (
    DEFAULT_TIMEOUT,
    get_api_url,
    get_api_key,
    get_timeout,
    get_default_languages,
)

# Re-export static constants
from apertium.config.constants import (
    DEFAULT_API_URL,
    DEFAULT_FROM_LANGUAGE,
    DEFAULT_TO_LANGUAGE,
    LIST_PAIRS_PATH,
    TRANSLATE_PATH,
    RESPONSE_STATUS_OK,
    RESPONSE_STATUS_TRAFFIC_LIMIT,
    RESPONSE_STATUS_MESSAGES,
)

# Re-export configuration model
from apertium.config.models import (
    ClientConfiguration,
    normalize_base_url,
)

__all__ = [
    # Settings
    'DEFAULT_TIMEOUT',
    'get_api_url',
    'get_api_key',
    'get_timeout',
    'get_default_languages',
    # Constants
    'DEFAULT_API_URL',
    'DEFAULT_FROM_LANGUAGE',
    'DEFAULT_TO_LANGUAGE',
    'LIST_PAIRS_PATH',
    'TRANSLATE_PATH',
    'RESPONSE_STATUS_OK',
    'RESPONSE_STATUS_TRAFFIC_LIMIT',
    'RESPONSE_STATUS_MESSAGES',
    # Model
    'ClientConfiguration',
    'normalize_base_url',
]
