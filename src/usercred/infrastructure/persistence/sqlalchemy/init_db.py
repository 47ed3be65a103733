"""Database initialization utilities."""

import logging

from sqlalchemy.engine import Engine

from usercred.infrastructure.persistence.sqlalchemy.tables import metadata

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    """
    Create the usuario and credencial tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")
    with engine.begin() as conn:
        metadata.create_all(conn)
    logger.info("Database schema is up to date (missing tables created if needed)")


def drop_tables(engine: Engine) -> None:
    """
    Drop all tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")
    with engine.begin() as conn:
        metadata.drop_all(conn)
    logger.info("Database tables dropped successfully")


def reset_tables(engine: Engine) -> None:
    """Drop all tables and recreate them."""
    drop_tables(engine)
    create_tables(engine)
