"""Account use-cases: users together with their access credential."""

from __future__ import annotations

import logging

from usercred.domain.accounts import (
    Credential,
    CredentialNotFoundError,
    CredentialRepository,
    User,
    UserRepository,
    validate_credential,
    validate_user,
)
from usercred.domain.shared.persistence import PersistenceState
from usercred.domain.shared.time import utc_now
from usercred.infrastructure.persistence.sqlalchemy import (
    ConnectionProvider,
    CredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    translate_database_errors,
)

logger = logging.getLogger(__name__)


class AccountService:
    """
    Orchestrates the user and credential repositories.

    ``create_with_credential`` is the only multi-table write: both inserts
    share one connection and one transaction, so a failure anywhere leaves
    neither row behind.
    """

    def __init__(
        self,
        provider: ConnectionProvider,
        user_repository: UserRepository,
        credential_repository: CredentialRepository,
    ):
        self._provider = provider
        self._users = user_repository
        self._credentials = credential_repository

    @classmethod
    def from_provider(cls, provider: ConnectionProvider) -> AccountService:
        return cls(
            provider=provider,
            user_repository=UserRepositorySQLAlchemy(provider),
            credential_repository=CredentialRepositorySQLAlchemy(provider),
        )

    def create_with_credential(self, user: User, credential: Credential) -> User:
        """
        Create a user and its credential as one unit of work.

        Parameters
        ----------
        user
            New user; its id is assigned from the store's generated key
        credential
            New credential; its owner is set to the new user's id

        Returns
        -------
        The persisted user with ``credential`` attached

        Raises
        ------
        ValidationError
            If a required field is blank or the email is malformed
        ConstraintViolationError
            If the username (or the credential owner) already exists
        StoreConnectionError
            If the store cannot be reached or the connection drops
        """
        validate_user(user)
        validate_credential(credential)

        user_defaults = (user.active, user.registered_at)
        credential_defaults = (credential.require_reset, credential.last_changed)
        try:
            with (
                translate_database_errors(username=user.username),
                self._provider.transaction() as conn,
            ):
                self._users.insert_in_tx(user, conn)
                credential.owner_user_id = user.id
                self._credentials.insert_in_tx(credential, conn)
        except Exception:
            # The transaction was rolled back; everything read inside it is void.
            user.state = PersistenceState()
            user.active, user.registered_at = user_defaults
            credential.state = PersistenceState()
            credential.require_reset, credential.last_changed = credential_defaults
            credential.owner_user_id = None
            logger.warning(
                "Rolled back creation of user %s with credential",
                user.username,
            )
            raise

        user.credential = credential
        logger.info(
            "Created user %s (username: %s) with credential %s",
            user.id,
            user.username,
            credential.id,
        )
        return user

    def get_all(self) -> list[User]:
        return self._users.get_all()

    def get_by_username(self, username: str) -> User | None:
        return self._users.get_by_username(username.strip())

    def get_by_id(self, user_id: int) -> User | None:
        return self._users.get_by_id(user_id)

    def update(self, user: User) -> None:
        validate_user(user)
        self._users.update(user)

    def soft_delete(self, user_id: int) -> None:
        self._users.soft_delete(user_id)

    def get_credential(self, user_id: int) -> Credential | None:
        return self._credentials.get_by_owner_user_id(user_id)

    def change_credential(
        self,
        user_id: int,
        hash_password: str,
        salt: str,
        require_reset: bool = False,
    ) -> Credential:
        """Replace the hash and salt of a user's live credential."""
        credential = self._credentials.get_by_owner_user_id(user_id)
        if credential is None:
            raise CredentialNotFoundError(owner_user_id=user_id)

        credential.hash_password = hash_password
        credential.salt = salt
        credential.require_reset = require_reset
        credential.last_changed = utc_now()
        validate_credential(credential)

        self._credentials.update(credential)
        return credential
