"""Static constants and lookup tables.

Configuration values that don't change at runtime.
"""

# Public Apertium APy server
DEFAULT_API_URL = 'https://www.apertium.org/apy/'

# APy request paths (relative to the base URL)
LIST_PAIRS_PATH = 'listPairs'
TRANSLATE_PATH = 'translate'

# Default translation direction
DEFAULT_FROM_LANGUAGE = 'eng'
DEFAULT_TO_LANGUAGE = 'spa'

# Envelope "responseStatus" codes reported by APy
RESPONSE_STATUS_OK = 200
RESPONSE_STATUS_TRAFFIC_LIMIT = 552
RESPONSE_STATUS_MESSAGES = {
    400: 'Bad parameters; a compulsory argument is missing, or there is an argument with wrong format',
    451: "Unsupported pair; the translation engine can't translate with the requested language pair",
    452: "Unsupported format; the translation engine doesn't recognize the requested format",
    500: 'Unexpected error; an unexpected error happened',
    552: 'The traffic limit for your IP or your user has been reached',
}
