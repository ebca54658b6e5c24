"""Exceptions raised by the Apertium client."""
from typing import Optional


class ApertiumError(Exception):
    """Base exception for all Apertium client errors"""
    pass


class RemoteError(ApertiumError):
    """Raised when the remote service fails or answers with an error status.

    Attributes:
        status: HTTP status or APy responseStatus, None for transport failures
        message: Human readable description
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self):
        if self.status is None:
            return self.message
        return f"[{self.status}] {self.message}"


class AuthenticationError(RemoteError):
    """Raised when the API key is rejected"""
    pass


class RateLimitError(RemoteError):
    """Raised when the server's traffic limit is exceeded"""
    pass


class MalformedResponseError(RemoteError):
    """Raised when a response parses but lacks the expected fields"""
    pass


class InvalidPairError(ApertiumError):
    """Raised when a language pair is not offered by the server"""

    def __init__(self, from_language: str, to_language: str):
        super().__init__(f"Invalid language pair: {from_language} -> {to_language}")
        self.from_language = from_language
        self.to_language = to_language


class ConfigurationError(ApertiumError):
    """Raised when a client cannot be constructed with its configuration"""
    pass
