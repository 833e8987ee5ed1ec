"""
Database access for Voyago.

Importing this package registers all ORM models on Base.metadata,
which Alembic needs for autogenerate. Runtime reads and writes go through
a DataStore; PostgresStore is the production implementation.
"""

from core.db.interface import DataStore, Filter, contains, eq, in_
from core.db.postgres import PostgresStore, database_credentials
from core.db.schemas.base import Base
from core.db.schemas.expense import ExpenseRecord
from core.db.schemas.notification import NotificationRecord
from core.db.schemas.trip import TripRecord

__all__ = [
    "Base",
    "DataStore",
    "ExpenseRecord",
    "Filter",
    "NotificationRecord",
    "PostgresStore",
    "TripRecord",
    "contains",
    "database_credentials",
    "eq",
    "in_",
]
