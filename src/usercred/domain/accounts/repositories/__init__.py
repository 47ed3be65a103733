"""Abstract repository interfaces for accounts."""

from usercred.domain.accounts.repositories.credential_repository import (
    CredentialRepository,
)
from usercred.domain.accounts.repositories.crud_repository import CrudRepository
from usercred.domain.accounts.repositories.user_repository import UserRepository

__all__ = [
    "CredentialRepository",
    "CrudRepository",
    "UserRepository",
]
