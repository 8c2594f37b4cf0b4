"""Response and credential stand-ins shared by the test modules."""
from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

FAKE_API_KEY = "FAKE_API_KEY_123"
FAKE_API_SECRET = "FAKE_API_SECRET_456"
FAKE_CUSTOMER_ID = "123456"


def make_response(payload: Any = None, status_code: int = 200, body: bytes | None = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = body if body is not None else json.dumps(payload).encode()
    return response
