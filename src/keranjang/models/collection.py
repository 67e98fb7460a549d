"""CollectionBlob model for the relational store backend."""
from datetime import datetime
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TZDateTime, utc_now


class CollectionBlob(Base):
    """One whole collection, stored as a JSON array."""

    __tablename__ = "collections"

    key: Mapped[str] = mapped_column(String(50), primary_key=True)
    payload: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    updated_at: Mapped[datetime] = mapped_column(
        TZDateTime,
        default=utc_now,
        onupdate=utc_now,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<CollectionBlob(key='{self.key}', size={len(self.payload)})>"
