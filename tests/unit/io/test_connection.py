"""
Tests for the settings-driven connection helper.
"""

from unittest.mock import MagicMock

import pytest

from pgchain.config.settings import Settings
from pgchain.exceptions import ConfigurationError
from pgchain.io.connection import connect


@pytest.fixture
def fake_connect(monkeypatch):
    fake = MagicMock(return_value=MagicMock(name="connection"))
    monkeypatch.setattr("pgchain.io.connection.psycopg.connect", fake)
    return fake


def test_connect_uses_configured_url(monkeypatch, fake_connect):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db/app_test")
    monkeypatch.setenv("CONNECT_TIMEOUT", "9")

    conn = connect()

    assert conn is fake_connect.return_value
    fake_connect.assert_called_once_with(
        "postgresql://u:p@db/app_test", connect_timeout=9, autocommit=True
    )


def test_explicit_url_and_kwargs_win(monkeypatch, fake_connect):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/ignored")

    connect("postgresql://x@y/z", connect_timeout=1, autocommit=False)

    fake_connect.assert_called_once_with(
        "postgresql://x@y/z", connect_timeout=1, autocommit=False
    )


def test_missing_url_raises(monkeypatch, fake_connect):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setattr(
        "pgchain.io.connection.get_settings", lambda: Settings(_env_file=None)
    )

    with pytest.raises(ConfigurationError):
        connect()

    fake_connect.assert_not_called()


def test_connection_defaults_to_autocommit(monkeypatch, fake_connect):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u@db/app_test")

    connect()

    assert fake_connect.call_args.kwargs["autocommit"] is True
