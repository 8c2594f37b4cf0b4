from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import appdirs  # type: ignore[import-untyped]
import yaml  # type: ignore[import-untyped]

from bitstamp_client.credentials import (
    API_KEY_ENV,
    API_SECRET_ENV,
    CUSTOMER_ID_ENV,
    Credentials,
)

logger = logging.getLogger(__name__)

APP_NAME = "bitstamp_client"
CONFIG_FILENAME = "config.yaml"

BITSTAMP_API_URL = "https://www.bitstamp.net/api"
DEFAULT_USER_AGENT = "bitstamp-client/0.1.0"

API_URL_ENV = "BITSTAMP_API_URL"
REQUEST_TIMEOUT_ENV = "BITSTAMP_REQUEST_TIMEOUT"


@dataclass
class ClientConfig:
    api_url: str = BITSTAMP_API_URL
    # None leaves timeouts to the transport.
    request_timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT


def get_config_dir() -> Path:
    """
    Returns the OS-specific configuration directory for the client using appdirs.
    """
    return Path(appdirs.user_config_dir(APP_NAME))


def _read_config_file(config_path: Optional[Path]) -> Dict[str, Any]:
    path = config_path or get_config_dir() / CONFIG_FILENAME
    if not path.exists():
        return {}

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        logger.warning(
            "Ignoring config file with unexpected layout",
            extra={"event": "config_invalid_layout", "path": str(path)},
        )
        return {}
    return data


def _parse_timeout(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"request_timeout must be positive; got {value!r}")
    return timeout


def load_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Loads client settings from ``config.yaml`` (``client:`` section) and applies
    environment overrides. A missing file yields the defaults.
    """
    raw = _read_config_file(config_path)
    section = raw.get("client") or {}
    if not isinstance(section, dict):
        section = {}

    config = ClientConfig(
        api_url=str(section.get("api_url") or BITSTAMP_API_URL).rstrip("/"),
        request_timeout=_parse_timeout(section.get("request_timeout")),
        user_agent=str(section.get("user_agent") or DEFAULT_USER_AGENT),
    )

    env_url = os.getenv(API_URL_ENV)
    if env_url:
        config.api_url = env_url.rstrip("/")

    env_timeout = os.getenv(REQUEST_TIMEOUT_ENV)
    if env_timeout:
        config.request_timeout = _parse_timeout(env_timeout)

    return config


def load_credentials(config_path: Optional[Path] = None) -> Optional[Credentials]:
    """
    Loads API credentials.

    Priority:
    1. Environment variables (BITSTAMP_APIKEY, BITSTAMP_APISECRET, BITSTAMP_CUSTOMERID)
    2. ``credentials:`` section of config.yaml

    Returns ``None`` when neither source provides all three values.
    """
    credentials = Credentials.from_env()
    if credentials is not None:
        return credentials

    section = _read_config_file(config_path).get("credentials") or {}
    if not isinstance(section, dict):
        return None

    return Credentials.from_env(
        {
            API_KEY_ENV: str(section.get("api_key") or ""),
            API_SECRET_ENV: str(section.get("api_secret") or ""),
            CUSTOMER_ID_ENV: str(section.get("customer_id") or ""),
        }
    )
