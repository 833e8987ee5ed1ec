"""
Pydantic models for Voyago.
"""

from core.models.balances import Balances, BalanceStatus
from core.models.expense import EXPENSE_LABELS, Expense, ExpenseCategory, ExpenseCreate
from core.models.notification import Notification, NotificationWithTrip, TripShareRequest
from core.models.places import LatLng, NearbySearchQuery
from core.models.trip import DateRange, ItineraryLocation, SharedUser, Trip, TripCreate, TripSummary, TripUpdate
from core.models.user import UserProfile

__all__ = [
    "Balances",
    "BalanceStatus",
    "DateRange",
    "EXPENSE_LABELS",
    "Expense",
    "ExpenseCategory",
    "ExpenseCreate",
    "ItineraryLocation",
    "LatLng",
    "NearbySearchQuery",
    "Notification",
    "NotificationWithTrip",
    "SharedUser",
    "Trip",
    "TripCreate",
    "TripShareRequest",
    "TripSummary",
    "TripUpdate",
    "UserProfile",
]
