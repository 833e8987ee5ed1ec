"""
Client-side state for Voyago.

Each provider holds a re-fetchable copy of remote data plus loading and
error flags, and talks to the database only through an injected DataStore.
"""

from core.state.cache import RefreshCache
from core.state.expenses import ExpenseProvider
from core.state.notices import Notice, NoticeLevel, NoticeLog
from core.state.notifications import NotificationProvider
from core.state.trips import TripProvider
from core.state.users import UserDirectoryProvider

__all__ = [
    "ExpenseProvider",
    "Notice",
    "NoticeLevel",
    "NoticeLog",
    "NotificationProvider",
    "RefreshCache",
    "TripProvider",
    "UserDirectoryProvider",
]
