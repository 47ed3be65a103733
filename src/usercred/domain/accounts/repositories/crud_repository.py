"""Generic CRUD capability shared by the account repositories."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection

T = TypeVar("T")


class CrudRepository(ABC, Generic[T]):
    """Insert / update / soft-delete / read contract for one entity type.

    Self-contained operations acquire and release their own connection.
    ``insert_in_tx`` instead runs on a connection owned by the caller and
    never commits, so it can take part in a larger unit of work.
    """

    @abstractmethod
    def insert(self, entity: T) -> None:
        """Insert the entity and assign its generated id."""

    @abstractmethod
    def insert_in_tx(self, entity: T, conn: "Connection") -> None:
        """Insert the entity on the caller's transaction and assign its id."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Replace the mutable columns of the live row matching ``entity.id``."""

    @abstractmethod
    def soft_delete(self, entity_id: int) -> None:
        """Flag the live row as deleted."""

    @abstractmethod
    def get_by_id(self, entity_id: int) -> T | None:
        """Return the live row with this id, or None."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return every live row."""
