# src/bitstamp_client/connection/exceptions.py

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    TRANSPORT = "transport"
    DOMAIN = "domain"
    CREDENTIAL = "credential"
    VALIDATION = "validation"


class BitstampAPIError(Exception):
    """Base exception for all Bitstamp API related errors."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class TransportError(BitstampAPIError):
    """Raised on network failures, non-200 responses, or bodies that are not JSON."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DomainError(BitstampAPIError):
    """Raised when Bitstamp answers with ``{"status": "error", ...}``."""

    kind = ErrorKind.DOMAIN

    def __init__(self, reason: Any, code: Optional[str] = None):
        # Bitstamp sometimes sends a dict of field errors as the reason.
        super().__init__(str(reason), code=code)
        self.reason = reason

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} ({self.code})"
        return self.message


class CredentialError(BitstampAPIError):
    """Raised when a private call is attempted without usable credentials."""

    kind = ErrorKind.CREDENTIAL


class ValidationError(BitstampAPIError, ValueError):
    """Raised when order parameters fail local checks before submission."""

    kind = ErrorKind.VALIDATION
