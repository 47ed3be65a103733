"""MySQL fixtures override the SQLite ones for tests in this folder."""

from tests.shared.fixtures.mysql import (  # noqa: F401
    database_url,
    mysql_container,
    provider,
)
