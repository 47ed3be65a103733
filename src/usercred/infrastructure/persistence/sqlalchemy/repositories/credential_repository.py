"""SQLAlchemy implementation of CredentialRepository.

Credentials are read from their own table only; the user side of the
relationship is loaded by UserRepositorySQLAlchemy.
"""

import logging

from sqlalchemy import Select, false, insert, select, update
from sqlalchemy.engine import Connection

from usercred.domain.accounts import (
    Credential,
    CredentialNotFoundError,
    CredentialRepository,
)
from usercred.domain.shared.exceptions import ConstraintViolationError
from usercred.infrastructure.persistence.sqlalchemy.connection import (
    ConnectionProvider,
)
from usercred.infrastructure.persistence.sqlalchemy.errors import (
    translate_database_errors,
)
from usercred.infrastructure.persistence.sqlalchemy.mappers import (
    credential_insert_params,
    credential_update_params,
    row_to_credential,
)
from usercred.infrastructure.persistence.sqlalchemy.repositories._utils import (
    generated_key,
)
from usercred.infrastructure.persistence.sqlalchemy.tables import (
    credencial_table,
    usuario_table,
)

logger = logging.getLogger(__name__)

c = credencial_table
u = usuario_table


class CredentialRepositorySQLAlchemy(CredentialRepository):
    """
    SQLAlchemy implementation of CredentialRepository.

    Hash and salt are stored exactly as given. The owner reference is
    checked against live users on insert and never re-validated afterwards.
    """

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    def insert(self, credential: Credential) -> None:
        with (
            translate_database_errors(owner_user_id=credential.owner_user_id),
            self._provider.transaction() as conn,
        ):
            self._insert(conn, credential)
        logger.info(
            "Created credential %s for user: %s",
            credential.id,
            credential.owner_user_id,
        )

    def insert_in_tx(self, credential: Credential, conn: Connection) -> None:
        with translate_database_errors(owner_user_id=credential.owner_user_id):
            self._insert(conn, credential)
        logger.debug("Inserted credential %s in caller transaction", credential.id)

    def update(self, credential: Credential) -> None:
        """
        Replace hash, salt and require_reset of the credential.

        ``ultimo_cambio`` is written too when ``last_changed`` is set.

        Raises
        ------
        CredentialNotFoundError
            If no live credential has ``credential.id``.
        """
        if credential.id is None:
            raise CredentialNotFoundError(None)

        stmt = (
            update(c)
            .where(c.c.id == credential.id, c.c.eliminado == false())
            .values(credential_update_params(credential))
        )
        with (
            translate_database_errors(credential_id=credential.id),
            self._provider.transaction() as conn,
        ):
            result = conn.execute(stmt)
            if result.rowcount == 0:
                raise CredentialNotFoundError(credential.id)
        logger.info("Updated credential: %s", credential.id)

    def soft_delete(self, entity_id: int) -> None:
        stmt = (
            update(c)
            .where(c.c.id == entity_id, c.c.eliminado == false())
            .values(eliminado=True)
        )
        with (
            translate_database_errors(credential_id=entity_id),
            self._provider.transaction() as conn,
        ):
            result = conn.execute(stmt)
            if result.rowcount == 0:
                raise CredentialNotFoundError(entity_id)
        logger.info("Soft-deleted credential: %s", entity_id)

    def get_by_id(self, entity_id: int) -> Credential | None:
        stmt = select(c).where(c.c.id == entity_id, c.c.eliminado == false())
        return self._fetch_one(stmt, credential_id=entity_id)

    def get_by_owner_user_id(self, user_id: int) -> Credential | None:
        stmt = select(c).where(c.c.id_usuario == user_id, c.c.eliminado == false())
        return self._fetch_one(stmt, owner_user_id=user_id)

    def get_all(self) -> list[Credential]:
        stmt = select(c).where(c.c.eliminado == false()).order_by(c.c.id)
        with translate_database_errors(), self._provider.connection() as conn:
            rows = conn.execute(stmt).mappings().all()
        logger.debug("Loaded %d credentials", len(rows))
        return [row_to_credential(row) for row in rows]

    def _fetch_one(self, stmt: Select, **details) -> Credential | None:
        with translate_database_errors(**details), self._provider.connection() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return row_to_credential(row)

    def _insert(self, conn: Connection, credential: Credential) -> None:
        owner_id = credential.owner_user_id
        owner = conn.execute(
            select(u.c.id).where(u.c.id == owner_id, u.c.eliminado == false()),
        ).first()
        if owner is None:
            raise ConstraintViolationError(
                f"Credential owner does not exist or is deleted: {owner_id}",
                details={"owner_user_id": owner_id},
            )

        result = conn.execute(insert(c), credential_insert_params(credential))
        credential_id = generated_key(result, owner_user_id=owner_id)

        # ultimo_cambio, require_reset and eliminado come from store defaults
        defaults = (
            conn.execute(
                select(c.c.ultimo_cambio, c.c.require_reset, c.c.eliminado).where(
                    c.c.id == credential_id,
                ),
            )
            .mappings()
            .one()
        )
        credential.last_changed = defaults["ultimo_cambio"]
        credential.require_reset = bool(defaults["require_reset"])
        credential.soft_deleted = bool(defaults["eliminado"])
        credential.id = credential_id
