"""Shared domain building blocks."""

from usercred.domain.shared.exceptions import (
    ConstraintViolationError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
    StoreConnectionError,
    ValidationError,
)
from usercred.domain.shared.persistence import PersistenceState
from usercred.domain.shared.time import ensure_naive_utc, utc_now

__all__ = [
    "ConstraintViolationError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "PersistenceError",
    "PersistenceState",
    "StoreConnectionError",
    "ValidationError",
    "ensure_naive_utc",
    "utc_now",
]
