"""Integration test configuration and fixtures.

Repositories, service and CLI run against a file-backed SQLite database
created per test.
"""

from tests.shared.fixtures.database import (  # noqa: F401
    account_service,
    credential_repository,
    database_url,
    provider,
    user_repository,
)
