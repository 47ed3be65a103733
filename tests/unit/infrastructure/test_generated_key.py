"""Tests for inserts whose result carries no generated key."""

from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest

from usercred.domain.shared.exceptions import ErrorCode, PersistenceError
from usercred.infrastructure.persistence.sqlalchemy import (
    CredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from usercred.infrastructure.persistence.sqlalchemy.repositories._utils import (
    generated_key,
)

from tests.shared.fixtures import AccountFactory


def _result(inserted_primary_key):
    result = MagicMock()
    result.inserted_primary_key = inserted_primary_key
    return result


class _FakeProvider:
    def __init__(self, conn):
        self._conn = conn

    @contextmanager
    def transaction(self):
        yield self._conn


class TestGeneratedKey:
    def test_returns_key(self):
        assert generated_key(_result((7,))) == 7

    @pytest.mark.parametrize("missing", [(None,), (), None])
    def test_missing_key_raises(self, missing):
        with pytest.raises(PersistenceError) as exc_info:
            generated_key(_result(missing), username="adiaz")

        assert exc_info.value.code == ErrorCode.GENERATED_KEY_MISSING
        assert exc_info.value.details == {"username": "adiaz"}


class TestRepositoryInsertWithoutKey:
    def test_user_insert_leaves_id_unset(self):
        conn = MagicMock()
        conn.execute.return_value = _result((None,))
        repository = UserRepositorySQLAlchemy(_FakeProvider(conn))
        user = AccountFactory.user()

        with pytest.raises(PersistenceError):
            repository.insert(user)

        assert user.id is None

    def test_user_insert_in_tx_leaves_id_unset(self):
        conn = MagicMock()
        conn.execute.return_value = _result(())
        repository = UserRepositorySQLAlchemy(_FakeProvider(conn))
        user = AccountFactory.user()

        with pytest.raises(PersistenceError):
            repository.insert_in_tx(user, conn)

        assert user.id is None

    def test_credential_insert_leaves_id_unset(self):
        conn = MagicMock()
        owner_lookup = MagicMock()
        owner_lookup.first.return_value = (1,)
        conn.execute.side_effect = [owner_lookup, _result((None,))]
        repository = CredentialRepositorySQLAlchemy(_FakeProvider(conn))
        credential = AccountFactory.credential(owner_user_id=1)

        with pytest.raises(PersistenceError):
            repository.insert(credential)

        assert credential.id is None
