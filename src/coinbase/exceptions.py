"""Exception hierarchy for the Coinbase Advanced Trade client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class CoinbaseError(Exception):
    """Base exception for all Coinbase client errors."""


class ConfigurationError(CoinbaseError):
    """API key name or secret is not configured."""


class KeyFormatError(CoinbaseError):
    """Key secret is not a SEC1-encoded P-256 EC private key."""


class SigningError(CoinbaseError):
    """JWT construction failed for a structurally valid key."""


class TransportError(CoinbaseError):
    """Failed to reach the Coinbase API."""


class HTTPStatusError(CoinbaseError):
    """Coinbase responded with a non-success status.

    The original response stays attached so callers can inspect the
    body and headers.
    """

    def __init__(self, message: str, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class DecodeError(CoinbaseError):
    """Response body did not match the expected schema."""
