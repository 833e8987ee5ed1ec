"""create_voyago_tables

Revision ID: 4b1e7c9a2d10
Revises: 
Create Date: 2026-10-19 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e7c9a2d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    # Trips: itinerary, shared users and date range live in jsonb columns
    op.execute("""
        CREATE TABLE trips (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            tripname VARCHAR(50) NOT NULL,
            country VARCHAR(100) NOT NULL,
            daterange JSONB NOT NULL,
            ownerid VARCHAR(255) NOT NULL,
            imageurl TEXT,
            locations JSONB NOT NULL DEFAULT '[]'::jsonb,
            sharedusers JSONB NOT NULL DEFAULT '[]'::jsonb,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("CREATE INDEX idx_trips_ownerid ON trips (ownerid)")
    # GIN index serves the sharedusers @> containment lookup
    op.execute("CREATE INDEX idx_trips_sharedusers ON trips USING gin (sharedusers)")

    op.execute("""
        CREATE TABLE expenses (
            id BIGSERIAL PRIMARY KEY,
            trip_id UUID NOT NULL REFERENCES trips (id) ON DELETE CASCADE,
            name TEXT NOT NULL,
            amount NUMERIC(12, 2) NOT NULL,
            expense_type VARCHAR(20) NOT NULL,
            paid_by VARCHAR(255) NOT NULL,
            split_between TEXT[] NOT NULL,
            percentages JSONB,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            CONSTRAINT chk_expenses_amount_positive CHECK (amount > 0),
            CONSTRAINT chk_expenses_expense_type
                CHECK (expense_type IN ('FOOD', 'TRAVEL', 'ACCOMMODATION', 'SHOPPING', 'MISC')),
            CONSTRAINT chk_expenses_split_between CHECK (cardinality(split_between) > 0)
        )
    """)
    op.execute("CREATE INDEX idx_expenses_trip_id ON expenses (trip_id)")

    op.execute("""
        CREATE TABLE notifications (
            id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
            user_id VARCHAR(255) NOT NULL,
            trip_id UUID REFERENCES trips (id) ON DELETE CASCADE,
            message TEXT NOT NULL,
            is_read BOOLEAN NOT NULL DEFAULT false,
            accept BOOLEAN,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)
    op.execute("CREATE INDEX idx_notifications_user_id_is_read ON notifications (user_id, is_read)")
    op.execute("CREATE INDEX idx_notifications_trip_id ON notifications (trip_id)")


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TABLE IF EXISTS notifications")
    op.execute("DROP TABLE IF EXISTS expenses")
    op.execute("DROP TABLE IF EXISTS trips")
