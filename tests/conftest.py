"""Shared fixtures for the Bitstamp client tests."""
from __future__ import annotations

import pytest

from bitstamp_client.credentials import Credentials
from helpers import FAKE_API_KEY, FAKE_API_SECRET, FAKE_CUSTOMER_ID


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        api_key=FAKE_API_KEY,
        api_secret=FAKE_API_SECRET,
        customer_id=FAKE_CUSTOMER_ID,
    )


@pytest.fixture(autouse=True)
def _clear_bitstamp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BITSTAMP_APIKEY",
        "BITSTAMP_APISECRET",
        "BITSTAMP_CUSTOMERID",
        "BITSTAMP_API_URL",
        "BITSTAMP_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
