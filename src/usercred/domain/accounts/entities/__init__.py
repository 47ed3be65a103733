"""Account entities."""

from usercred.domain.accounts.entities.credential import Credential
from usercred.domain.accounts.entities.user import User

__all__ = [
    "Credential",
    "User",
]
