# src/bitstamp_client/connection/__init__.py

from .decimals import clamp
from .envelope import parse_envelope
from .exceptions import (
    BitstampAPIError,
    CredentialError,
    DomainError,
    ErrorKind,
    TransportError,
    ValidationError,
)
from .nonce import NonceGenerator
from .rest_client import BitstampRESTClient
from .signer import sign

__all__ = [
    "BitstampAPIError",
    "BitstampRESTClient",
    "CredentialError",
    "DomainError",
    "ErrorKind",
    "NonceGenerator",
    "TransportError",
    "ValidationError",
    "clamp",
    "parse_envelope",
    "sign",
]
