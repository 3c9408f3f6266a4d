"""Creation of the database engine from settings."""

import logging
from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from .config import DatabaseConfig

log = logging.getLogger(__name__)


def _ensure_database(engine: Engine, conn: Connection) -> None:
    name = conn.execute(text("SELECT current_database()")).scalar_one()
    exists = conn.execute(
        text("SELECT 1 FROM pg_database WHERE datname = :name"), {"name": name}
    ).first()
    if exists is not None:
        return
    quoted = engine.dialect.identifier_preparer.quote(name)
    with engine.connect().execution_options(isolation_level="AUTOCOMMIT") as admin:
        admin.execute(text(f"CREATE DATABASE {quoted}"))


def create_db(database: DatabaseConfig) -> Optional[Engine]:
    """Open the configured database, or return None when it is disabled.

    On PostgreSQL the current database is created if it does not exist yet.
    Connection failures propagate as SQLAlchemy errors.
    """
    log.debug("database enabled: %s", database.enabled)
    if not database.enabled:
        log.debug("database is not enabled")
        return None
    engine = create_engine(database.url)
    log.debug("database address: %r", engine.url)
    try:
        with engine.connect() as conn:
            if engine.dialect.name == "postgresql":
                _ensure_database(engine, conn)
    except Exception:
        log.error("cannot open database %r", engine.url)
        engine.dispose()
        raise
    return engine