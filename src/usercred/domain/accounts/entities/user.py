"""User entity (row of the ``usuario`` table)."""

from dataclasses import dataclass, field
from datetime import datetime

from usercred.domain.accounts.entities.credential import Credential
from usercred.domain.shared.persistence import PersistenceState


@dataclass
class User:
    """A user account.

    ``active`` is a business flag and is independent of the soft-delete flag
    kept in ``state``. ``credential`` is only populated by reads that join the
    credential table; ``None`` means the user has no live credential.
    """

    first_name: str
    last_name: str
    username: str
    email: str
    active: bool = True
    registered_at: datetime | None = None
    credential: Credential | None = None
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

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def has_credential(self) -> bool:
        return self.credential is not None
