"""
Testcontainers-based MySQL fixtures.

Provides an ephemeral MySQL server per test session. Each test gets a clean
schema via drop/create. Only tests marked ``integration`` use these, and
they are skipped unless enabled (see tests/conftest.py).
"""

import os

import pytest
from testcontainers.mysql import MySqlContainer

from usercred.infrastructure.persistence.sqlalchemy import (
    ConnectionProvider,
    reset_tables,
)

# Same major version as production
MYSQL_IMAGE = os.environ.get("TEST_MYSQL_IMAGE", "mysql:8.0")


@pytest.fixture(scope="session")
def mysql_container():
    """
    Start a MySQL container for the test session.

    The container is automatically cleaned up when the session ends.
    """
    with MySqlContainer(MYSQL_IMAGE) as mysql:
        yield mysql


@pytest.fixture
def database_url(mysql_container) -> str:
    url = mysql_container.get_connection_url()
    # Testcontainers may return mysql:// or mysql+<driver>://
    if url.startswith("mysql://"):
        url = url.replace("mysql://", "mysql+pymysql://", 1)
    return url


@pytest.fixture
def provider(database_url):
    """Connection provider on a freshly recreated schema."""
    provider = ConnectionProvider(database_url)
    reset_tables(provider.engine)
    yield provider
    provider.dispose()
