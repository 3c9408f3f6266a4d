"""Persistence of user rows."""

from typing import Any, Iterable, Optional

from sqlalchemy import update as sql_update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .entities import UserEntity


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


class UserRepository:
    """Reads and writes UserEntity rows through a SQLAlchemy engine.

    The engine may be None when no database is configured; every operation
    then raises RuntimeError.
    """

    def __init__(self, engine: Optional[Engine]):
        self.engine = engine
        self._sessions = (
            sessionmaker(bind=engine, expire_on_commit=False) if engine is not None else None
        )

    def _session_factory(self) -> sessionmaker:
        if self._sessions is None:
            raise RuntimeError("no database is configured")
        return self._sessions

    def save(self, info: UserEntity) -> None:
        """Insert the row, or overwrite it when it already has a primary key."""
        with self._session_factory().begin() as session:
            if info.id is None:
                session.add(info)
            else:
                session.merge(info)

    def save_all(self, entities: Iterable[UserEntity]) -> None:
        """Save each entity in turn, stopping at the first failure."""
        for info in entities or ():
            self.save(info)

    def update(self, info: UserEntity, id: int) -> None:
        """Update the row with the given id, writing only the non-zero fields of info."""
        values = {}
        for attr in UserEntity.__mapper__.column_attrs:
            if attr.key == "id":
                continue
            value = getattr(info, attr.key)
            if not _is_zero(value):
                values[attr.key] = value
        if not values:
            return
        with self._session_factory().begin() as session:
            session.execute(
                sql_update(UserEntity).where(UserEntity.id == id).values(**values)
            )

    def find_by_id_string(self, id: str) -> Optional[UserEntity]:
        """Look a row up by its primary key given as text; None when absent or unreadable."""
        factory = self._session_factory()
        try:
            key = int(id)
        except (TypeError, ValueError):
            return None
        try:
            with factory() as session:
                return session.get(UserEntity, key)
        except SQLAlchemyError:
            return None