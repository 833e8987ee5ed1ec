"""SQLAlchemy ORM model for the expenses table."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Index, Numeric, String, Text, text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base

if TYPE_CHECKING:
    from core.db.schemas.trip import TripRecord


class ExpenseRecord(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    trip_id: Mapped[str] = mapped_column(UUID, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    expense_type: Mapped[str] = mapped_column(String(20), nullable=False)
    paid_by: Mapped[str] = mapped_column(String(255), nullable=False)
    split_between = mapped_column(ARRAY(Text), nullable=False)
    percentages = mapped_column(JSONB)
    created_at = mapped_column(TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()"))

    trip: Mapped["TripRecord"] = relationship(back_populates="expenses")

    __table_args__ = (
        CheckConstraint("amount > 0", name="chk_expenses_amount_positive"),
        CheckConstraint(
            "expense_type IN ('FOOD', 'TRAVEL', 'ACCOMMODATION', 'SHOPPING', 'MISC')",
            name="chk_expenses_expense_type",
        ),
        CheckConstraint("cardinality(split_between) > 0", name="chk_expenses_split_between"),
        Index("idx_expenses_trip_id", "trip_id"),
    )
