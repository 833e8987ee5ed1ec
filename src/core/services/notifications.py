"""Notification persistence service."""

import logging
from typing import Sequence

from core.db.interface import DataStore, eq, in_
from core.db.records import parse_record, parse_records
from core.errors import ErrorCode, PersistenceError
from core.models.notification import Notification, NotificationWithTrip

logger = logging.getLogger(__name__)

NOTIFICATIONS_TABLE = "notifications"

_TRIP_SUMMARY_COLUMNS = ("id", "tripname", "country", "daterange", "ownerid", "created_at", "imageurl", "locations")


def add_notifications_for_trip_share(
    store: DataStore,
    user_ids: Sequence[str],
    trip_id: str | None,
    message: str,
) -> list[Notification]:
    """Insert one notification per recipient, all with the same trip and message."""
    rows = [{"user_id": user_id, "trip_id": trip_id, "message": message} for user_id in user_ids]
    try:
        inserted = store.insert(NOTIFICATIONS_TABLE, rows)
    except PersistenceError as e:
        raise PersistenceError(e.message, code=ErrorCode.SHARE_FAILED) from e

    logger.info("Added %d notifications for trip %s", len(inserted), trip_id)
    return parse_records(Notification, inserted)


def fetch_notifications_by_trip(store: DataStore, trip_id: str) -> list[Notification]:
    return parse_records(Notification, store.select(NOTIFICATIONS_TABLE, [eq("trip_id", trip_id)]))


def fetch_unread_notifications_by_user(store: DataStore, user_id: str) -> list[NotificationWithTrip]:
    """Unread notifications for ``user_id``, newest first, with trip details attached."""
    rows = store.select(
        NOTIFICATIONS_TABLE,
        [eq("user_id", user_id), eq("is_read", False)],
        order_by="created_at",
        descending=True,
    )

    trip_ids = sorted({str(row["trip_id"]) for row in rows if row.get("trip_id")})
    trips_by_id = {}
    if trip_ids:
        for trip in store.select("trips", [in_("id", trip_ids)]):
            trips_by_id[str(trip["id"])] = {col: trip.get(col) for col in _TRIP_SUMMARY_COLUMNS}

    return parse_records(
        NotificationWithTrip,
        [{**row, "trip": trips_by_id.get(str(row.get("trip_id")))} for row in rows],
    )


def mark_notification_read(store: DataStore, notification_id: str, accept: bool | None = None) -> Notification:
    values: dict[str, object] = {"is_read": True}
    if accept is not None:
        values["accept"] = accept

    rows = store.update(NOTIFICATIONS_TABLE, values, [eq("id", notification_id)])
    if not rows:
        raise PersistenceError(f"Notification {notification_id} not found", code=ErrorCode.PERSISTENCE_FAILED)
    return parse_record(Notification, rows[0])
