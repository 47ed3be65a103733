"""Shared test fixtures."""

from tests.shared.fixtures.database import count_rows
from tests.shared.fixtures.factories import AccountFactory

__all__ = [
    "AccountFactory",
    "count_rows",
]
