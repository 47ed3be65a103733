"""User repository interface."""

from abc import abstractmethod

from usercred.domain.accounts.entities import User
from usercred.domain.accounts.repositories.crud_repository import CrudRepository


class UserRepository(CrudRepository[User]):
    """Repository interface for users.

    Every read eager-loads the user's live credential.
    """

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Find a live user by their unique username."""

    @abstractmethod
    def get_by_id_including_deleted(self, user_id: int) -> User | None:
        """Find a user by id whether or not it has been soft-deleted."""
