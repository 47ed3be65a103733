"""SQLAlchemy table definitions for the account store.

These are thin persistence mappings using the store's own column names.
Domain objects live in usercred.domain.accounts; rows are translated by the
functions in the mappers module.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    false,
    func,
    true,
)

metadata = MetaData()

usuario_table = Table(
    "usuario",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("nombre", String(100), nullable=False),
    Column("apellido", String(100), nullable=False),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(150), nullable=False),
    Column("activo", Boolean, nullable=False, server_default=true()),
    Column("fechaRegistro", DateTime, nullable=False, server_default=func.now()),
    Column("eliminado", Boolean, nullable=False, server_default=false()),
)

credencial_table = Table(
    "credencial",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("contraseña", String(255), nullable=False),
    Column("salt", String(255), nullable=False),
    Column("ultimo_cambio", DateTime, nullable=False, server_default=func.now()),
    Column("require_reset", Boolean, nullable=False, server_default=false()),
    Column(
        "id_usuario",
        Integer,
        ForeignKey("usuario.id"),
        nullable=False,
        unique=True,
    ),
    Column("eliminado", Boolean, nullable=False, server_default=false()),
)
