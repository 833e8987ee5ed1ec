"""Trip persistence service."""

import logging
import random
from typing import Any, Sequence

from core.db.interface import DataStore, contains, eq
from core.db.records import parse_record, parse_records
from core.errors import ErrorCode, PersistenceError
from core.models.trip import ItineraryLocation, SharedUser, Trip, TripCreate, TripUpdate

logger = logging.getLogger(__name__)

TRIPS_TABLE = "trips"
COVER_IMAGE_COUNT = 6


def _with_code(e: PersistenceError, code: ErrorCode) -> PersistenceError:
    # Malformed rows keep their own code; transport failures take the action's code.
    if e.code is ErrorCode.PERSISTENCE_FAILED:
        return PersistenceError(e.message, code=code)
    return e


def _daterange_json(trip: TripCreate) -> dict[str, Any]:
    return trip.daterange.model_dump(mode="json", by_alias=True)


def save_trip(store: DataStore, trip: TripCreate, owner_id: str, rng: random.Random | None = None) -> Trip:
    """Insert a new trip owned by ``owner_id`` with a random cover image."""
    cover = (rng or random).randint(1, COVER_IMAGE_COUNT)
    try:
        rows = store.insert(
            TRIPS_TABLE,
            [
                {
                    "tripname": trip.tripname,
                    "country": trip.country,
                    "daterange": _daterange_json(trip),
                    "ownerid": owner_id,
                    "imageurl": str(cover),
                }
            ],
        )
    except PersistenceError as e:
        raise _with_code(e, ErrorCode.TRIP_SAVE_FAILED) from e

    saved = parse_record(Trip, rows[0])
    logger.info("Saved trip %s for owner %s", saved.id, owner_id)
    return saved


def fetch_trip(store: DataStore, trip_id: str) -> Trip:
    rows = store.select(TRIPS_TABLE, [eq("id", trip_id)])
    if not rows:
        raise PersistenceError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    return parse_record(Trip, rows[0])


def fetch_trips_by_user(store: DataStore, user_id: str) -> list[Trip]:
    """Trips owned by ``user_id``."""
    return parse_records(Trip, store.select(TRIPS_TABLE, [eq("ownerid", user_id)], order_by="created_at"))


def fetch_trips_shared_with_user(store: DataStore, user_id: str) -> list[Trip]:
    """Trips whose shared-user list contains ``user_id``."""
    rows = store.select(
        TRIPS_TABLE,
        [contains("sharedusers", [{"userId": user_id}])],
        order_by="created_at",
    )
    return parse_records(Trip, rows)


def update_trip(store: DataStore, trip: TripUpdate) -> Trip:
    try:
        rows = store.update(
            TRIPS_TABLE,
            {"tripname": trip.tripname, "country": trip.country, "daterange": _daterange_json(trip)},
            [eq("id", trip.tripid)],
        )
    except PersistenceError as e:
        raise _with_code(e, ErrorCode.TRIP_UPDATE_FAILED) from e
    if not rows:
        raise PersistenceError(f"Trip {trip.tripid} not found", code=ErrorCode.TRIP_NOT_FOUND)
    return parse_record(Trip, rows[0])


def delete_trip(store: DataStore, trip_id: str) -> None:
    """Delete a trip. Its expenses and notifications go with it."""
    try:
        deleted = store.delete(TRIPS_TABLE, [eq("id", trip_id)])
    except PersistenceError as e:
        raise _with_code(e, ErrorCode.TRIP_DELETE_FAILED) from e
    if not deleted:
        raise PersistenceError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    logger.info("Deleted trip %s", trip_id)


def update_trip_locations(store: DataStore, trip_id: str, locations: Sequence[ItineraryLocation]) -> Trip:
    try:
        rows = store.update(
            TRIPS_TABLE,
            {"locations": [loc.model_dump(mode="json") for loc in locations]},
            [eq("id", trip_id)],
        )
    except PersistenceError as e:
        raise _with_code(e, ErrorCode.ITINERARY_SAVE_FAILED) from e
    if not rows:
        raise PersistenceError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    return parse_record(Trip, rows[0])


def update_trip_shared_users(store: DataStore, trip_id: str, shared_users: Sequence[SharedUser]) -> Trip:
    """Replace the shared-user list, dropping repeated user ids."""
    seen: set[str] = set()
    unique: list[dict[str, str]] = []
    for shared in shared_users:
        if shared.userId not in seen:
            seen.add(shared.userId)
            unique.append({"userId": shared.userId})

    try:
        rows = store.update(TRIPS_TABLE, {"sharedusers": unique}, [eq("id", trip_id)])
    except PersistenceError as e:
        raise _with_code(e, ErrorCode.TRIP_UPDATE_FAILED) from e
    if not rows:
        raise PersistenceError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    return parse_record(Trip, rows[0])
