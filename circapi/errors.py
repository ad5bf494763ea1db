"""
circapi exceptions

Every failure surfaced by the library derives from APIError so callers can
catch the whole family or one specific kind.
"""

from typing import Optional


class APIError(Exception):
    """Base class for all circapi errors."""


class ConfigError(APIError):
    """API configuration is missing or invalid."""


class InvalidCIDError(APIError):
    """A resource CID is absent or does not match the resource path shape."""


class InvalidConfigError(APIError):
    """A resource argument was None where a value is required."""


class SerializationError(APIError):
    """A resource could not be encoded to JSON."""


class DeserializationError(APIError):
    """A response body could not be decoded into the expected type."""


class TransportError(APIError):
    """The underlying HTTP call failed (connection error or non-2xx status)."""

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body
