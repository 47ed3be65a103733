"""SQLAlchemy implementation of the account store.

Provides:
- ConnectionProvider: per-request connections from validated settings
- usuario_table / credencial_table: Core table definitions
- UserRepositorySQLAlchemy / CredentialRepositorySQLAlchemy: access layer
- create_tables / drop_tables / reset_tables: schema helpers
"""

from usercred.infrastructure.persistence.sqlalchemy.connection import (
    ConnectionProvider,
)
from usercred.infrastructure.persistence.sqlalchemy.errors import (
    translate_database_errors,
)
from usercred.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    reset_tables,
)
from usercred.infrastructure.persistence.sqlalchemy.repositories import (
    CredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from usercred.infrastructure.persistence.sqlalchemy.tables import (
    credencial_table,
    metadata,
    usuario_table,
)

__all__ = [
    "ConnectionProvider",
    "CredentialRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "create_tables",
    "credencial_table",
    "drop_tables",
    "metadata",
    "reset_tables",
    "translate_database_errors",
    "usuario_table",
]
