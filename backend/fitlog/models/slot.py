"""
Storage slot database model.
One row per persisted key; the value is an opaque JSON text blob.
"""
from datetime import datetime
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from fitlog.core.database import Base


class StorageSlot(Base):
    """Key-value slot stored in database."""

    __tablename__ = "storage_slots"

    key: Mapped[str] = mapped_column(
        String(100),
        primary_key=True
    )
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )
