"""
Error taxonomy shared by the content providers and the coordinators.

Each error carries a stable ``code`` that the API layer reports to clients:

- MISSING_API_KEY: the user has not configured a NASA key (recoverable by
  the user, shown as an inline call-to-action)
- TRANSPORT_ERROR: network unreachable or the request failed in flight
- INVALID_RESPONSE: non-2xx status code
- DECODE_ERROR: response body does not match the expected schema
- NOT_FOUND: unknown catalog or store identifier
"""

from typing import Optional


class ProviderError(Exception):
    """Base class for every failure surfaced by a content provider."""

    code = "PROVIDER_ERROR"

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": str(self),
        }


class MissingCredentialError(ProviderError):
    """No API key is configured; no request was attempted."""

    code = "MISSING_API_KEY"

    def __init__(self, message: str = "NASA API key is not configured"):
        super().__init__(message)


class TransportError(ProviderError):
    """The underlying HTTP I/O raised."""

    code = "TRANSPORT_ERROR"


class InvalidResponseError(ProviderError):
    """The server answered with a status code outside [200, 299]."""

    code = "INVALID_RESPONSE"

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Unexpected HTTP status {status_code}")

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "status_code": self.status_code,
        }


class DecodeError(ProviderError):
    """The response body could not be decoded into the expected record."""

    code = "DECODE_ERROR"


class NotFoundError(ProviderError):
    """The requested identifier does not exist."""

    code = "NOT_FOUND"
