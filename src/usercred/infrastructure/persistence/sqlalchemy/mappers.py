"""Translation between table rows and account entities.

Decoders accept any row mapping (``Result.mappings()``) keyed by column name.
Joined user reads label every credential column with ``CREDENTIAL_PREFIX``
so they cannot collide with the user's own ``id`` and ``eliminado``.

Encoders build the parameters of one specific statement. Insert and update
statements write different column sets and must not share encoders.
"""

from collections.abc import Mapping
from typing import Any

from usercred.domain.accounts.entities import Credential, User
from usercred.domain.shared.persistence import PersistenceState
from usercred.domain.shared.time import ensure_naive_utc

CREDENTIAL_PREFIX = "c_"


# Decode


def row_to_credential(row: Mapping[str, Any], prefix: str = "") -> Credential:
    return Credential(
        hash_password=row[f"{prefix}contraseña"],
        salt=row[f"{prefix}salt"],
        owner_user_id=row[f"{prefix}id_usuario"],
        require_reset=bool(row[f"{prefix}require_reset"]),
        last_changed=row[f"{prefix}ultimo_cambio"],
        state=PersistenceState(
            id=row[f"{prefix}id"],
            soft_deleted=bool(row[f"{prefix}eliminado"]),
        ),
    )


def row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        first_name=row["nombre"],
        last_name=row["apellido"],
        username=row["username"],
        email=row["email"],
        active=bool(row["activo"]),
        registered_at=row["fechaRegistro"],
        state=PersistenceState(
            id=row["id"],
            soft_deleted=bool(row["eliminado"]),
        ),
    )


def row_to_user_with_credential(row: Mapping[str, Any]) -> User:
    """Decode a user row joined with its (optional) credential.

    A NULL joined key means the outer join found no live credential; the
    user's ``credential`` is then left as None.
    """
    user = row_to_user(row)
    if row[f"{CREDENTIAL_PREFIX}id"] is not None:
        user.credential = row_to_credential(row, prefix=CREDENTIAL_PREFIX)
    return user


# Encode


def user_insert_params(user: User) -> dict[str, Any]:
    """Parameters of the user INSERT; store defaults cover the rest."""
    return {
        "nombre": user.first_name,
        "apellido": user.last_name,
        "username": user.username,
        "email": user.email,
    }


def user_update_params(user: User) -> dict[str, Any]:
    """Parameters of the user UPDATE (row selected by id separately)."""
    return {
        "nombre": user.first_name,
        "apellido": user.last_name,
        "username": user.username,
        "email": user.email,
        "activo": user.active,
    }


def credential_insert_params(credential: Credential) -> dict[str, Any]:
    """Parameters of the credential INSERT; store defaults cover the rest."""
    return {
        "contraseña": credential.hash_password,
        "salt": credential.salt,
        "id_usuario": credential.owner_user_id,
    }


def credential_update_params(credential: Credential) -> dict[str, Any]:
    """Parameters of the credential UPDATE (row selected by id separately).

    ``ultimo_cambio`` is only written when the caller set ``last_changed``.
    """
    params: dict[str, Any] = {
        "contraseña": credential.hash_password,
        "salt": credential.salt,
        "require_reset": credential.require_reset,
    }
    if credential.last_changed is not None:
        params["ultimo_cambio"] = ensure_naive_utc(credential.last_changed)
    return params
