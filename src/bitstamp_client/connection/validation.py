from __future__ import annotations

from typing import Optional

import requests

from bitstamp_client.config import ClientConfig
from bitstamp_client.connection.exceptions import (
    BitstampAPIError,
    CredentialError,
    DomainError,
    TransportError,
)
from bitstamp_client.connection.rest_client import BitstampRESTClient
from bitstamp_client.credentials import CredentialCheck, CredentialStatus, Credentials


def validate_credentials(
    credentials: Optional[Credentials],
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
) -> CredentialCheck:
    """
    Perform a low risk private call to validate credentials and classify the failure.

    The call is always signed with ``credentials``; ``config`` and ``session``
    only choose where and how it is sent.

    This NEVER logs anything and NEVER raises a secret bearing exception.
    """
    if credentials is None or not credentials.is_complete:
        return CredentialCheck(status=CredentialStatus.MISSING)

    client = BitstampRESTClient.from_config(
        config or ClientConfig(), credentials=credentials, session=session
    )

    try:
        # Balance is read-only, so a successful call proves the signature is accepted.
        client.call_private("/v2/balance/")
        return CredentialCheck(status=CredentialStatus.VALID)
    except CredentialError as exc:
        return CredentialCheck(status=CredentialStatus.MISSING, error=exc)
    except DomainError as exc:
        return CredentialCheck(
            status=CredentialStatus.REJECTED,
            error_code=exc.code,
            error=exc,
        )
    except (TransportError, BitstampAPIError) as exc:
        return CredentialCheck(
            status=CredentialStatus.SERVICE_ERROR,
            error_code=exc.code,
            error=exc,
        )
