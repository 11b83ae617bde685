"""Service program and exported procedure models."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from as400_catalog.db.base import Base

DEFAULT_SOURCE_FILE = "QFUENTES"


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ServiceProgram(Base):
    """A service program (*SRVPGM) whose exports are catalogued."""

    __tablename__ = "srvpgm"

    library: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(10), primary_key=True)
    source_file: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default=DEFAULT_SOURCE_FILE,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
    )


class ProcedureRecord(Base):
    """An exported procedure of a service program and its description."""

    __tablename__ = "srvpgm_method"
    __table_args__ = (
        Index("idx_srvpgm_method_lib_name", "library", "srvpgm_name"),
        Index("idx_srvpgm_method_name", "method_name"),
    )

    library: Mapped[str] = mapped_column(String(128), primary_key=True)
    srvpgm_name: Mapped[str] = mapped_column(String(10), primary_key=True)
    method_name: Mapped[str] = mapped_column(String(256), primary_key=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
    )
