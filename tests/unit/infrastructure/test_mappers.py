"""Tests for row decoding and statement parameter encoding."""

from datetime import datetime, timedelta, timezone

from usercred.infrastructure.persistence.sqlalchemy.mappers import (
    CREDENTIAL_PREFIX,
    credential_insert_params,
    credential_update_params,
    row_to_credential,
    row_to_user,
    row_to_user_with_credential,
    user_insert_params,
    user_update_params,
)

from tests.shared.fixtures import AccountFactory

REGISTERED = datetime(2024, 5, 1, 10, 30, 0)
CHANGED = datetime(2024, 5, 2, 8, 0, 0)


def _user_row(**overrides) -> dict:
    row = {
        "id": 1,
        "nombre": "Ana",
        "apellido": "Diaz",
        "username": "adiaz",
        "email": "ana@x.io",
        "activo": 1,
        "fechaRegistro": REGISTERED,
        "eliminado": 0,
    }
    row.update(overrides)
    return row


def _credential_columns(prefix: str = "", **overrides) -> dict:
    row = {
        "id": 10,
        "contraseña": "h1",
        "salt": "s1",
        "ultimo_cambio": CHANGED,
        "require_reset": 0,
        "id_usuario": 1,
        "eliminado": 0,
    }
    row.update(overrides)
    return {f"{prefix}{key}": value for key, value in row.items()}


class TestDecode:
    def test_row_to_user(self):
        user = row_to_user(_user_row())

        assert user.id == 1
        assert user.username == "adiaz"
        assert user.active is True
        assert user.soft_deleted is False
        assert user.registered_at == REGISTERED
        assert user.credential is None

    def test_row_to_credential(self):
        credential = row_to_credential(_credential_columns(require_reset=1))

        assert credential.id == 10
        assert credential.hash_password == "h1"
        assert credential.salt == "s1"
        assert credential.owner_user_id == 1
        assert credential.require_reset is True
        assert credential.last_changed == CHANGED

    def test_joined_row_attaches_credential(self):
        row = {**_user_row(), **_credential_columns(CREDENTIAL_PREFIX)}

        user = row_to_user_with_credential(row)

        assert user.id == 1
        assert user.credential is not None
        assert user.credential.id == 10
        assert user.credential.owner_user_id == user.id

    def test_joined_row_without_credential(self):
        empty = {key: None for key in _credential_columns(CREDENTIAL_PREFIX)}

        user = row_to_user_with_credential({**_user_row(), **empty})

        assert user.credential is None
        assert user.has_credential is False

    def test_user_and_credential_flags_do_not_mix(self):
        row = {
            **_user_row(eliminado=1, activo=0),
            **_credential_columns(CREDENTIAL_PREFIX, eliminado=0),
        }

        user = row_to_user_with_credential(row)

        assert user.soft_deleted is True
        assert user.active is False
        assert user.credential.soft_deleted is False


class TestEncode:
    def test_user_insert_leaves_store_defaults_out(self):
        params = user_insert_params(AccountFactory.user())

        assert params == {
            "nombre": "Ana",
            "apellido": "Diaz",
            "username": "adiaz",
            "email": "ana@x.io",
        }

    def test_user_update_writes_active_flag(self):
        params = user_update_params(AccountFactory.user(active=False))

        assert params["activo"] is False
        assert "eliminado" not in params

    def test_credential_insert(self):
        params = credential_insert_params(AccountFactory.credential(owner_user_id=4))

        assert params == {"contraseña": "h1", "salt": "s1", "id_usuario": 4}

    def test_credential_update_without_last_changed(self):
        params = credential_update_params(AccountFactory.credential())

        assert "ultimo_cambio" not in params
        assert params["require_reset"] is False

    def test_credential_update_stores_naive_utc(self):
        credential = AccountFactory.credential()
        credential.last_changed = datetime(
            2024, 5, 2, 10, 0, tzinfo=timezone(timedelta(hours=2))
        )

        params = credential_update_params(credential)

        assert params["ultimo_cambio"] == CHANGED
