"""Accounts domain: users and their access credentials."""

from usercred.domain.accounts.entities import Credential, User
from usercred.domain.accounts.exceptions import (
    CredentialNotFoundError,
    UserNotFoundError,
)
from usercred.domain.accounts.repositories import (
    CredentialRepository,
    CrudRepository,
    UserRepository,
)
from usercred.domain.accounts.validation import validate_credential, validate_user

__all__ = [
    "Credential",
    "CredentialNotFoundError",
    "CredentialRepository",
    "CrudRepository",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "validate_credential",
    "validate_user",
]
