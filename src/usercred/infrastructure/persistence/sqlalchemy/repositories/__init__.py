"""SQLAlchemy repository implementations."""

from usercred.infrastructure.persistence.sqlalchemy.repositories.credential_repository import (  # noqa: E501
    CredentialRepositorySQLAlchemy,
)
from usercred.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "CredentialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
