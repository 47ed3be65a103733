"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import Select, and_, false, insert, select, update
from sqlalchemy.engine import Connection

from usercred.domain.accounts import User, UserNotFoundError, UserRepository
from usercred.infrastructure.persistence.sqlalchemy.connection import (
    ConnectionProvider,
)
from usercred.infrastructure.persistence.sqlalchemy.errors import (
    translate_database_errors,
)
from usercred.infrastructure.persistence.sqlalchemy.mappers import (
    CREDENTIAL_PREFIX,
    row_to_user_with_credential,
    user_insert_params,
    user_update_params,
)
from usercred.infrastructure.persistence.sqlalchemy.repositories._utils import (
    generated_key,
)
from usercred.infrastructure.persistence.sqlalchemy.tables import (
    credencial_table,
    usuario_table,
)

logger = logging.getLogger(__name__)

u = usuario_table
c = credencial_table

# Soft-deleted credentials are filtered in the join condition, not in WHERE,
# so a user whose only credential was deleted is still returned.
_user_with_credential = u.outerjoin(
    c,
    and_(c.c.id_usuario == u.c.id, c.c.eliminado == false()),
)


def _select_users() -> Select:
    credential_columns = [
        column.label(f"{CREDENTIAL_PREFIX}{column.name}") for column in c.columns
    ]
    return select(u, *credential_columns).select_from(_user_with_credential)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    def insert(self, user: User) -> None:
        with (
            translate_database_errors(username=user.username),
            self._provider.transaction() as conn,
        ):
            self._insert(conn, user)
        logger.info("Created user: %s (username: %s)", user.id, user.username)

    def insert_in_tx(self, user: User, conn: Connection) -> None:
        with translate_database_errors(username=user.username):
            self._insert(conn, user)
        logger.debug("Inserted user %s in caller transaction", user.id)

    def update(self, user: User) -> None:
        if user.id is None:
            raise UserNotFoundError(None)

        stmt = (
            update(u)
            .where(u.c.id == user.id, u.c.eliminado == false())
            .values(user_update_params(user))
        )
        with (
            translate_database_errors(user_id=user.id, username=user.username),
            self._provider.transaction() as conn,
        ):
            result = conn.execute(stmt)
            if result.rowcount == 0:
                raise UserNotFoundError(user.id)
        logger.info("Updated user: %s", user.id)

    def soft_delete(self, entity_id: int) -> None:
        # Deleting a user also deactivates it, in the same statement.
        stmt = (
            update(u)
            .where(u.c.id == entity_id, u.c.eliminado == false())
            .values(eliminado=True, activo=False)
        )
        with (
            translate_database_errors(user_id=entity_id),
            self._provider.transaction() as conn,
        ):
            result = conn.execute(stmt)
            if result.rowcount == 0:
                raise UserNotFoundError(entity_id)
        logger.info("Soft-deleted user: %s", entity_id)

    def get_by_id(self, entity_id: int) -> User | None:
        stmt = _select_users().where(u.c.id == entity_id, u.c.eliminado == false())
        return self._fetch_one(stmt, user_id=entity_id)

    def get_by_username(self, username: str) -> User | None:
        stmt = _select_users().where(
            u.c.username == username,
            u.c.eliminado == false(),
        )
        return self._fetch_one(stmt, username=username)

    def get_by_id_including_deleted(self, user_id: int) -> User | None:
        stmt = _select_users().where(u.c.id == user_id)
        return self._fetch_one(stmt, user_id=user_id)

    def get_all(self) -> list[User]:
        stmt = _select_users().where(u.c.eliminado == false()).order_by(u.c.id)
        with translate_database_errors(), self._provider.connection() as conn:
            rows = conn.execute(stmt).mappings().all()
        logger.debug("Loaded %d users", len(rows))
        return [row_to_user_with_credential(row) for row in rows]

    def _fetch_one(self, stmt: Select, **details) -> User | None:
        with translate_database_errors(**details), self._provider.connection() as conn:
            row = conn.execute(stmt).mappings().first()
        if row is None:
            return None
        return row_to_user_with_credential(row)

    def _insert(self, conn: Connection, user: User) -> None:
        result = conn.execute(insert(u), user_insert_params(user))
        user_id = generated_key(result, username=user.username)

        # activo, fechaRegistro and eliminado come from store defaults
        defaults = (
            conn.execute(
                select(u.c.activo, u.c.fechaRegistro, u.c.eliminado).where(
                    u.c.id == user_id,
                ),
            )
            .mappings()
            .one()
        )
        user.active = bool(defaults["activo"])
        user.registered_at = defaults["fechaRegistro"]
        user.soft_deleted = bool(defaults["eliminado"])
        user.id = user_id
