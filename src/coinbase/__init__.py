"""Coinbase Advanced Trade REST client."""

from src.coinbase.auth import Authenticator, Claims, Credentials, build_jwt, generate_nonce
from src.coinbase.client import CoinbaseClient
from src.coinbase.endpoints import build_query_string
from src.coinbase.exceptions import (
    CoinbaseError,
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    KeyFormatError,
    SigningError,
    TransportError,
)

__all__ = [
    "Authenticator",
    "Claims",
    "CoinbaseClient",
    "CoinbaseError",
    "ConfigurationError",
    "Credentials",
    "DecodeError",
    "HTTPStatusError",
    "KeyFormatError",
    "SigningError",
    "TransportError",
    "build_jwt",
    "build_query_string",
    "generate_nonce",
]
