# src/bitstamp_client/connection/envelope.py

import json
from typing import Any, Union

from .exceptions import DomainError, TransportError

ERROR_STATUS = "error"


def parse_envelope(body: Union[bytes, str], status_code: int) -> Any:
    """
    Classifies a raw Bitstamp response.

    Non-200 statuses and bodies that are not JSON raise ``TransportError``.
    A JSON object whose ``status`` is ``"error"`` raises ``DomainError`` with the
    exchange's ``reason`` and ``code``. Anything else is returned as parsed,
    without any shape validation.
    """
    if status_code != 200:
        raise TransportError(f"Request failed with {status_code}", status_code=status_code)

    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as e:
        raise TransportError(f"Malformed response body: {e}", status_code=status_code) from e

    if isinstance(payload, dict) and payload.get("status") == ERROR_STATUS:
        raise DomainError(payload.get("reason"), code=payload.get("code"))

    return payload
