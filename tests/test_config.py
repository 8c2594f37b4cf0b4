"""Tests for config file loading and environment overrides."""

from pathlib import Path

import pytest
import yaml  # type: ignore[import-untyped]

import appdirs  # type: ignore[import-untyped]
from bitstamp_client.config import (
    BITSTAMP_API_URL,
    ClientConfig,
    get_config_dir,
    load_config,
    load_credentials,
)


@pytest.fixture
def config_dir(monkeypatch, tmp_path: Path) -> Path:
    directory = tmp_path / "config"
    directory.mkdir()
    monkeypatch.setattr(appdirs, "user_config_dir", lambda appname: str(directory))
    return directory


def test_missing_file_yields_defaults(config_dir: Path):
    assert get_config_dir() == config_dir
    assert load_config() == ClientConfig()
    assert load_config().api_url == BITSTAMP_API_URL
    assert load_config().request_timeout is None


def test_file_values_loaded(config_dir: Path):
    (config_dir / "config.yaml").write_text(
        """
client:
  api_url: "https://sandbox.example/api/"
  request_timeout: 5
  user_agent: "desk-bot/2"
""".strip()
    )

    config = load_config()

    assert config.api_url == "https://sandbox.example/api"
    assert config.request_timeout == 5.0
    assert config.user_agent == "desk-bot/2"


def test_env_overrides_file(config_dir: Path, monkeypatch):
    (config_dir / "config.yaml").write_text("client:\n  request_timeout: 5\n")
    monkeypatch.setenv("BITSTAMP_API_URL", "https://override.example/api")
    monkeypatch.setenv("BITSTAMP_REQUEST_TIMEOUT", "1.5")

    config = load_config()

    assert config.api_url == "https://override.example/api"
    assert config.request_timeout == 1.5


def test_non_positive_timeout_rejected(config_dir: Path, monkeypatch):
    monkeypatch.setenv("BITSTAMP_REQUEST_TIMEOUT", "0")
    with pytest.raises(ValueError, match="request_timeout"):
        load_config()


def test_non_mapping_file_ignored(config_dir: Path):
    (config_dir / "config.yaml").write_text("- just\n- a list\n")
    assert load_config() == ClientConfig()


def test_invalid_yaml_raises(config_dir: Path):
    (config_dir / "config.yaml").write_text("client: [unterminated\n")
    with pytest.raises(yaml.YAMLError):
        load_config()


def test_explicit_path(tmp_path: Path):
    path = tmp_path / "custom.yaml"
    path.write_text("client:\n  user_agent: custom\n")
    assert load_config(path).user_agent == "custom"


def test_credentials_from_env(config_dir: Path, monkeypatch):
    monkeypatch.setenv("BITSTAMP_APIKEY", "env-key")
    monkeypatch.setenv("BITSTAMP_APISECRET", "env-secret")
    monkeypatch.setenv("BITSTAMP_CUSTOMERID", "42")

    credentials = load_credentials()

    assert credentials is not None
    assert credentials.api_key == "env-key"
    assert credentials.customer_id == "42"


def test_partial_env_falls_back_to_file(config_dir: Path, monkeypatch):
    monkeypatch.setenv("BITSTAMP_APIKEY", "env-key")
    (config_dir / "config.yaml").write_text(
        """
credentials:
  api_key: file-key
  api_secret: file-secret
  customer_id: 7
""".strip()
    )

    credentials = load_credentials()

    assert credentials is not None
    assert credentials.api_key == "file-key"
    assert credentials.customer_id == "7"


def test_no_credentials_anywhere(config_dir: Path):
    assert load_credentials() is None
