# src/bitstamp_client/connection/signer.py

import hashlib
import hmac

from bitstamp_client.credentials import Credentials

from .exceptions import CredentialError


def sign(nonce: int, credentials: Credentials) -> str:
    """
    Generates the signature for a private request.

    signature = uppercase hex of HMAC-SHA256(api_secret, nonce + customer_id + api_key)
    """
    if credentials is None or not credentials.api_secret:
        raise CredentialError("API secret is required for signing requests.")
    if not credentials.api_key or not credentials.customer_id:
        raise CredentialError("API key and customer ID are required for signing requests.")

    message = f"{nonce}{credentials.customer_id}{credentials.api_key}"
    mac = hmac.new(
        credentials.api_secret.encode(),
        message.encode(),
        hashlib.sha256,
    )
    return mac.hexdigest().upper()
