"""Shared utilities for SQLAlchemy repositories."""

from typing import Any

from sqlalchemy.engine import CursorResult

from usercred.domain.shared.exceptions import PersistenceError


def generated_key(result: CursorResult, **details: Any) -> int:
    """
    Return the primary key the store generated for a single-row INSERT.

    An insert that yields no key is treated as a failure, not a no-op.
    """
    key = result.inserted_primary_key
    if not key or key[0] is None:
        raise PersistenceError(details=details)
    return int(key[0])
