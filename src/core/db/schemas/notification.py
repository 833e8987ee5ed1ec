"""SQLAlchemy ORM model for the notifications table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base

if TYPE_CHECKING:
    from core.db.schemas.trip import TripRecord


class NotificationRecord(Base):
    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    trip_id: Mapped[str | None] = mapped_column(UUID, ForeignKey("trips.id", ondelete="CASCADE"))
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    accept: Mapped[bool | None] = mapped_column(Boolean)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    trip: Mapped["TripRecord"] = relationship(back_populates="notifications")

    __table_args__ = (
        Index("idx_notifications_user_id_is_read", "user_id", "is_read"),
        Index("idx_notifications_trip_id", "trip_id"),
    )
