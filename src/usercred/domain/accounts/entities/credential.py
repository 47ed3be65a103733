"""Credential entity (row of the ``credencial`` table)."""

from dataclasses import dataclass, field
from datetime import datetime

from usercred.domain.shared.persistence import PersistenceState


@dataclass
class Credential:
    """Access credential owned by exactly one user.

    ``hash_password`` and ``salt`` are opaque, pre-computed payloads; no
    hashing happens in this package. ``last_changed`` is filled by the store
    on insert and may be set by the caller before an update.
    """

    hash_password: str = field(repr=False)
    salt: str = field(repr=False)
    owner_user_id: int | None = None
    require_reset: bool = False
    last_changed: datetime | None = None
    state: PersistenceState = field(default_factory=PersistenceState)

    @property
    def id(self) -> int | None:
        return self.state.id

    @id.setter
    def id(self, value: int | None) -> None:
        self.state.id = value

    @property
    def soft_deleted(self) -> bool:
        return self.state.soft_deleted

    @soft_deleted.setter
    def soft_deleted(self, value: bool) -> None:
        self.state.soft_deleted = value
