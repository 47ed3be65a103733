"""Credential repository interface."""

from abc import abstractmethod

from usercred.domain.accounts.entities import Credential
from usercred.domain.accounts.repositories.crud_repository import CrudRepository


class CredentialRepository(CrudRepository[Credential]):
    """Repository interface for credentials."""

    @abstractmethod
    def get_by_owner_user_id(self, user_id: int) -> Credential | None:
        """Find the live credential owned by the given user."""
