"""Tests for environment-driven configuration."""
import pytest

from marketplace_notifications import config


def test_required_env_returns_value(monkeypatch):
    monkeypatch.setenv("SQLALCHEMY_CONNECTION_STRING", "sqlite://")

    assert config._get_required_env("SQLALCHEMY_CONNECTION_STRING") == "sqlite://"


def test_missing_required_env_raises(monkeypatch):
    monkeypatch.delenv("SQLALCHEMY_CONNECTION_STRING", raising=False)

    with pytest.raises(ValueError, match="SQLALCHEMY_CONNECTION_STRING"):
        config._get_required_env("SQLALCHEMY_CONNECTION_STRING")
