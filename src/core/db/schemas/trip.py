"""SQLAlchemy ORM model for the trips table."""

from sqlalchemy import Index, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base


class TripRecord(Base):
    __tablename__ = "trips"

    id: Mapped[str] = mapped_column(UUID, primary_key=True, server_default=text("gen_random_uuid()"))
    tripname: Mapped[str] = mapped_column(String(50), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    daterange = mapped_column(JSONB, nullable=False)
    ownerid: Mapped[str] = mapped_column(String(255), nullable=False)
    imageurl: Mapped[str | None] = mapped_column(Text)
    locations = mapped_column(JSONB, nullable=False, server_default=text("'[]'::jsonb"))
    sharedusers = mapped_column(JSONB, nullable=False, server_default=text("'[]'::jsonb"))
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    expenses: Mapped[list["ExpenseRecord"]] = relationship(back_populates="trip", cascade="all, delete-orphan")
    notifications: Mapped[list["NotificationRecord"]] = relationship(
        back_populates="trip", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_trips_ownerid", "ownerid"),
        Index("idx_trips_sharedusers", "sharedusers", postgresql_using="gin"),
    )


# Avoid circular import; related records are resolved by string reference above
from core.db.schemas.expense import ExpenseRecord  # noqa: E402, F401
from core.db.schemas.notification import NotificationRecord  # noqa: E402, F401
