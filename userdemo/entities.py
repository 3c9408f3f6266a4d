"""Database table definitions."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, SmallInteger, String, func, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _now() -> datetime:
    return datetime.now(timezone.utc)


_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Declarative base for all tables."""


class UserEntity(Base):
    """A user row."""

    __tablename__ = "user"
    __table_args__ = {"comment": "用户"}

    id: Mapped[int] = mapped_column(_ID_TYPE, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=True, default="", comment="名称")
    name_fl: Mapped[str] = mapped_column(String(255), nullable=True, default="", comment="名称外文")
    code: Mapped[str] = mapped_column(String(80), nullable=True, default="", comment="编号代号")
    name_full: Mapped[str] = mapped_column(String(255), nullable=True, default="", comment="全称")
    state: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, index=True, default=1, server_default=text("1"),
        comment="状态|1启用|2禁用",
    )
    description: Mapped[str] = mapped_column(String(255), nullable=True, default="", comment="描述")
    create_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), index=True, default=_now,
        server_default=func.current_timestamp(), comment="创建时间",
    )
    update_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now, comment="更新时间"
    )
    create_by: Mapped[str] = mapped_column(
        String(80), nullable=True, index=True, default="", server_default=text("''"),
        comment="创建人",
    )
    update_by: Mapped[str] = mapped_column(
        String(80), nullable=True, default="", server_default=text("''"), comment="更新人"
    )
    sort: Mapped[int] = mapped_column(
        BigInteger, nullable=False, default=0, server_default=text("0"), comment="排序"
    )

    def to_dict(self) -> dict:
        """The JSON form of the row."""

        def stamp(value: Optional[datetime]) -> Optional[str]:
            return value.isoformat() if value is not None else None

        return {
            "id": self.id,
            "name": self.name,
            "name_fl": self.name_fl,
            "code": self.code,
            "name_full": self.name_full,
            "state": self.state,
            "description": self.description,
            "create_at": stamp(self.create_at),
            "update_at": stamp(self.update_at),
            "create_by": self.create_by,
            "update_by": self.update_by,
            "sort": self.sort,
        }