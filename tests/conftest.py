"""Pytest configuration for the opt-in integration suite and DB fixtures.

A local ``.env`` file is loaded first so DATABASE_URL for the integration
suite can live outside the shell environment.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_ENV_FILE = Path(__file__).parent.parent / ".env"
if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=False)

import os
import re
from typing import Generator

import psycopg
import pytest
from psycopg.conninfo import conninfo_to_dict

from pgchain.config import get_settings

INTEGRATION_OPTION = "run_integration_tests"
INTEGRATION_MARK = "integration"
INTEGRATION_ENV = "RUN_INTEGRATION_TESTS"


def _validate_test_database(dsn: str) -> bool:
    """Ensure we're not connected to production database.

    Raises:
        RuntimeError: If database name doesn't match test pattern
    """
    if os.getenv("PGCHAIN_SKIP_DB_VALIDATION") == "1":
        return True

    db_name = conninfo_to_dict(dsn).get("dbname")
    if not db_name:
        raise RuntimeError(
            "Refusing to run tests against empty/missing database name. "
            "Test databases must contain one of: test, tmp, dev, local, sandbox."
        )

    if not re.search(r"(test|tmp|dev|local|sandbox)", str(db_name), re.IGNORECASE):
        raise RuntimeError(
            f"Refusing to run tests against non-test database: {db_name}. "
            "Test databases must contain one of: test, tmp, dev, local, sandbox. "
            "Override with PGCHAIN_SKIP_DB_VALIDATION=1 (DANGEROUS)."
        )
    return True


def _env_enabled(name: str) -> bool:
    """Return True when the opt-in environment flag is set to '1'."""
    return os.getenv(name) == "1"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register a CLI flag mirroring the RUN_INTEGRATION_TESTS toggle."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        dest=INTEGRATION_OPTION,
        default=_env_enabled(INTEGRATION_ENV),
        help="Run tests against a real PostgreSQL "
        "(set RUN_INTEGRATION_TESTS=1 or pass --run-integration).",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip the integration suite unless its flag is enabled."""
    if config.getoption(INTEGRATION_OPTION):
        return

    skip_integration = pytest.mark.skip(
        reason="Set RUN_INTEGRATION_TESTS=1 or pass --run-integration to run."
    )
    for item in items:
        if INTEGRATION_MARK in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def postgres_dsn() -> str:
    database_url = os.environ.get("DATABASE_URL")
    if not database_url or not database_url.startswith("postgres"):
        pytest.skip("PostgreSQL DATABASE_URL must be set for integration tests")
    _validate_test_database(database_url)
    return database_url


@pytest.fixture
def pg_connection(postgres_dsn: str) -> Generator[psycopg.Connection, None, None]:
    """Connection with a scratch ``users`` temp table, closed afterwards."""
    conn = psycopg.connect(postgres_dsn, autocommit=True)
    try:
        conn.execute(
            """
            CREATE TEMP TABLE users (
                id SERIAL PRIMARY KEY,
                name TEXT NOT NULL,
                email TEXT,
                age INT,
                status TEXT DEFAULT 'active',
                visits INT DEFAULT 0
            )
            """
        )
        yield conn
    finally:
        conn.close()
