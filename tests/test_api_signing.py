import hashlib
import hmac
import re

import pytest

from bitstamp_client.connection.exceptions import CredentialError, ErrorKind
from bitstamp_client.connection.signer import sign
from bitstamp_client.credentials import Credentials


def test_signature_matches_reference(credentials):
    nonce = 1616492376594
    expected = hmac.new(
        credentials.api_secret.encode(),
        f"{nonce}{credentials.customer_id}{credentials.api_key}".encode(),
        hashlib.sha256,
    ).hexdigest().upper()

    assert sign(nonce, credentials) == expected


def test_signature_is_deterministic_uppercase_hex(credentials):
    first = sign(1616492376594, credentials)
    second = sign(1616492376594, credentials)

    assert first == second
    assert re.fullmatch(r"[0-9A-F]{64}", first)


def test_signature_changes_with_nonce(credentials):
    assert sign(1, credentials) != sign(2, credentials)


@pytest.mark.parametrize(
    "creds",
    [
        None,
        Credentials(api_key="key", api_secret="", customer_id="1"),
        Credentials(api_key="", api_secret="secret", customer_id="1"),
        Credentials(api_key="key", api_secret="secret", customer_id=""),
    ],
)
def test_incomplete_credentials_rejected(creds):
    with pytest.raises(CredentialError) as excinfo:
        sign(1616492376594, creds)
    assert excinfo.value.kind is ErrorKind.CREDENTIAL
