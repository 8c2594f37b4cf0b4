from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

API_KEY_ENV = "BITSTAMP_APIKEY"
API_SECRET_ENV = "BITSTAMP_APISECRET"
CUSTOMER_ID_ENV = "BITSTAMP_CUSTOMERID"


@dataclass(frozen=True)
class Credentials:
    api_key: str
    api_secret: str
    customer_id: str

    @property
    def is_complete(self) -> bool:
        return bool(self.api_key and self.api_secret and self.customer_id)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Optional["Credentials"]:
        """Build credentials from the ``BITSTAMP_*`` variables, or ``None`` if any is unset."""

        env = os.environ if environ is None else environ
        api_key = env.get(API_KEY_ENV, "").strip()
        api_secret = env.get(API_SECRET_ENV, "").strip()
        customer_id = env.get(CUSTOMER_ID_ENV, "").strip()
        if not (api_key and api_secret and customer_id):
            return None
        return cls(api_key=api_key, api_secret=api_secret, customer_id=customer_id)

    def __repr__(self) -> str:
        # Intentionally omit secrets to avoid leaking them via logs.
        return (
            "Credentials("
            f"customer_id={'***' if self.customer_id else None}, "
            f"api_key={'***' if self.api_key else None}, "
            f"api_secret={'***' if self.api_secret else None})"
        )

    __str__ = __repr__


class CredentialStatus(Enum):
    VALID = "valid"
    MISSING = "missing"
    REJECTED = "rejected"
    SERVICE_ERROR = "service_error"


@dataclass
class CredentialCheck:
    status: CredentialStatus
    error_code: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status is CredentialStatus.VALID

    def __repr__(self) -> str:
        return (
            "CredentialCheck("
            f"status={self.status!r}, "
            f"error_code={self.error_code!r}, "
            f"error={type(self.error).__name__ if self.error else None})"
        )

    __str__ = __repr__
