"""Trip sharing: invitation notifications and the accept/decline handshake.

Sharing is two independent writes. ``share_trip`` inserts the invitations;
``respond_to_invitation`` later updates the trip's shared users and marks the
notification read. Nothing undoes the first write if the second one fails.
"""

import logging
from typing import Sequence

import pydantic

from core.db.interface import DataStore
from core.errors import ErrorCode, ValidationError
from core.models.notification import Notification, TripShareRequest
from core.models.trip import SharedUser, Trip
from core.services.notifications import add_notifications_for_trip_share, mark_notification_read
from core.services.trips import fetch_trip, update_trip_shared_users

logger = logging.getLogger(__name__)


def invitation_message(trip: Trip) -> str:
    return f"You have been invited to join a trip-{trip.tripname}"


def share_trip(store: DataStore, trip: Trip, user_ids: Sequence[str]) -> list[Notification]:
    try:
        request = TripShareRequest(trip_id=trip.id, user_ids=list(dict.fromkeys(user_ids)))
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid share request: {e}", code=ErrorCode.VALIDATION_ERROR) from e
    return add_notifications_for_trip_share(store, request.user_ids, request.trip_id, invitation_message(trip))


def respond_to_invitation(store: DataStore, notification: Notification, accept: bool) -> Notification:
    """Record the recipient's answer, joining them to the trip on accept."""
    if accept and notification.trip_id:
        trip = fetch_trip(store, notification.trip_id)
        if notification.user_id not in trip.shared_user_ids:
            update_trip_shared_users(
                store,
                trip.id,
                [*trip.sharedusers, SharedUser(userId=notification.user_id)],
            )
            logger.info("User %s joined trip %s", notification.user_id, trip.id)

    return mark_notification_read(store, notification.id, accept=accept)
