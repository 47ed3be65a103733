"""usercred - user accounts and their access credentials.

This package handles:
- Users and credentials as plain domain entities with a soft-delete flag
- Repositories over the ``usuario`` and ``credencial`` tables
- Atomic creation of a user together with its credential
- A Typer command line front end

Hash and salt values are stored as given; no hashing happens here.
"""

from usercred.application.services import AccountService
from usercred.domain.accounts import (
    Credential,
    CredentialNotFoundError,
    CredentialRepository,
    User,
    UserNotFoundError,
    UserRepository,
)
from usercred.domain.shared.exceptions import (
    ConstraintViolationError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    PersistenceError,
    StoreConnectionError,
    ValidationError,
)
from usercred.infrastructure.persistence.sqlalchemy import (
    ConnectionProvider,
    CredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_tables,
)

__all__ = [
    "AccountService",
    "ConnectionProvider",
    "ConstraintViolationError",
    "Credential",
    "CredentialNotFoundError",
    "CredentialRepository",
    "CredentialRepositorySQLAlchemy",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "PersistenceError",
    "StoreConnectionError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRepositorySQLAlchemy",
    "ValidationError",
    "create_tables",
]
