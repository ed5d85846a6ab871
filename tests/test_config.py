"""Tests for config.py — environment-based configuration loading."""

import os

import pytest

from miniflux_client.config import Config, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove all MINIFLUX env vars before each test."""
    for key in list(os.environ):
        if key.startswith("MINIFLUX_"):
            monkeypatch.delenv(key, raising=False)


def test_load_config_missing_url():
    """Missing server URL produces a clear validation error."""
    with pytest.raises((ValueError, SystemExit)):
        load_config()


def test_load_config_token(monkeypatch):
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_TOKEN", "tok")

    config = load_config()

    assert config.miniflux_url == "https://reader.example.com"
    assert config.credentials() == {"token": "tok"}


def test_load_config_basic(monkeypatch):
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_USERNAME", "alice")
    monkeypatch.setenv("MINIFLUX_PASSWORD", "s3cret")

    config = load_config()

    assert config.credentials() == {"username": "alice", "password": "s3cret"}


def test_token_preferred_over_password(monkeypatch):
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_TOKEN", "tok")
    monkeypatch.setenv("MINIFLUX_USERNAME", "alice")
    monkeypatch.setenv("MINIFLUX_PASSWORD", "s3cret")

    assert load_config().credentials() == {"token": "tok"}


def test_username_without_password_gives_no_credentials(monkeypatch):
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_USERNAME", "alice")

    assert load_config().credentials() == {}


def test_defaults(monkeypatch):
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")

    config = load_config()

    assert config.miniflux_token is None
    assert config.miniflux_timeout is None


def test_custom_timeout(monkeypatch):
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_TIMEOUT", "12.5")

    assert load_config().miniflux_timeout == 12.5


def test_secrets_are_masked(monkeypatch):
    """Token and password are masked in string representation."""
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_TOKEN", "tok-value")
    monkeypatch.setenv("MINIFLUX_PASSWORD", "s3cret")

    config = load_config()

    for secret in ("tok-value", "s3cret"):
        assert secret not in repr(config)
        assert secret not in str(config)


def test_extra_env_vars_ignored(monkeypatch):
    """Unknown env vars don't cause failures (extra='ignore')."""
    monkeypatch.setenv("MINIFLUX_URL", "https://reader.example.com")
    monkeypatch.setenv("MINIFLUX_UNKNOWN_VAR", "whatever")

    assert load_config().miniflux_url == "https://reader.example.com"


def test_config_direct_construction():
    """Config can be constructed directly with keyword args."""
    config = Config(MINIFLUX_URL="https://reader.example.com", MINIFLUX_USERNAME="bob")
    assert config.miniflux_username == "bob"
