"""Persistence bookkeeping shared by every stored entity."""

from dataclasses import dataclass


@dataclass
class PersistenceState:
    """Surrogate key and soft-delete flag of a stored row.

    Embedded in each entity instead of being inherited. ``id`` stays ``None``
    until the store assigns a generated key on insert.
    """

    id: int | None = None
    soft_deleted: bool = False

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
