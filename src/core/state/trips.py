import logging
from typing import Sequence

from core.db.interface import DataStore
from core.errors import USER_MESSAGES, ErrorCode
from core.models.notification import Notification
from core.models.trip import ItineraryLocation, SharedUser, Trip, TripCreate, TripUpdate
from core.services import itinerary, sharing
from core.services import trips as trip_service
from core.services.places import UNKNOWN_LOCATION, PlacesClient
from core.state.base import Provider
from core.state.cache import RefreshCache
from core.state.notices import NoticeLevel, NoticeSink

logger = logging.getLogger(__name__)


class TripProvider(Provider):
    """Trips visible to the viewer: the ones they own, then the ones shared with them."""

    def __init__(self, store: DataStore, viewer_id: str | None, notices: NoticeSink | None = None) -> None:
        super().__init__(notices)
        self._store = store
        self.viewer_id = viewer_id
        self.trips: list[Trip] = []
        self.selected_trip: Trip | None = None
        self._cache: RefreshCache[str, list[Trip]] = RefreshCache(self._fetch_visible_trips)

    def _fetch_visible_trips(self, viewer_id: str) -> list[Trip]:
        owned = trip_service.fetch_trips_by_user(self._store, viewer_id)
        shared = trip_service.fetch_trips_shared_with_user(self._store, viewer_id)
        owned_ids = {trip.id for trip in owned}
        return owned + [trip for trip in shared if trip.id not in owned_ids]

    def load(self, force: bool = False) -> list[Trip]:
        """Fetch the viewer's trips and select the first one."""
        if self.viewer_id is None:
            return self.trips

        viewer_id = self.viewer_id
        if force:
            self._cache.invalidate(viewer_id)
        result = self._read(lambda: self._cache.get(viewer_id))
        if result is not None:
            self.trips = result
            self.selected_trip = result[0] if result else None
        return self.trips

    def invalidate(self) -> None:
        if self.viewer_id is not None:
            self._cache.invalidate(self.viewer_id)

    def _reload(self) -> None:
        self.invalidate()
        self.load()

    def select(self, trip: Trip | None) -> None:
        self.selected_trip = trip

    def find(self, trip_id: str) -> Trip | None:
        return next((trip for trip in self.trips if trip.id == trip_id), None)

    def add_trip(self, trip: TripCreate) -> Trip | None:
        if self.viewer_id is None:
            self.notify(NoticeLevel.ERROR, USER_MESSAGES[ErrorCode.NOT_SIGNED_IN])
            return None

        owner_id = self.viewer_id
        saved = self._write(
            lambda: trip_service.save_trip(self._store, trip, owner_id),
            "Trip created successfully!",
        )
        if saved is not None:
            self._reload()
        return saved

    def update_trip(self, trip: TripUpdate) -> Trip | None:
        updated = self._write(lambda: trip_service.update_trip(self._store, trip), "Trip updated successfully!")
        if updated is not None:
            self._reload()
        return updated

    def delete_trip(self, trip_id: str) -> bool:
        def _delete() -> bool:
            trip_service.delete_trip(self._store, trip_id)
            return True

        deleted = bool(self._write(_delete, "Trip deleted successfully!"))
        if deleted:
            self._reload()
        return deleted

    def update_trip_shared_users(self, trip_id: str, shared_users: Sequence[SharedUser]) -> Trip | None:
        updated = self._write(lambda: trip_service.update_trip_shared_users(self._store, trip_id, shared_users))
        if updated is not None:
            self._reload()
        return updated

    def save_itinerary(self, trip_id: str, locations: Sequence[ItineraryLocation]) -> Trip | None:
        updated = self._write(
            lambda: trip_service.update_trip_locations(self._store, trip_id, locations),
            "Trip itinerary updated successfully!",
        )
        if updated is not None:
            self._reload()
        return updated

    def add_stop(
        self,
        trip_id: str,
        lat: float,
        lng: float,
        name: str | None = None,
        places: PlacesClient | None = None,
    ) -> Trip | None:
        """Append a stop in the viewer's marker color; unnamed stops are reverse geocoded."""
        trip = self.find(trip_id)
        if trip is None or self.viewer_id is None:
            logger.info("Ignoring stop for trip %s: not loaded or no viewer", trip_id)
            return None

        if name is None:
            name = places.reverse_geocode(lat, lng) if places is not None else UNKNOWN_LOCATION
        color = itinerary.marker_color_for(trip, self.viewer_id)
        return self.save_itinerary(trip_id, itinerary.add_location(trip, lat, lng, name, self.viewer_id, color))

    def remove_stop(self, trip_id: str, index: int) -> Trip | None:
        """Drop one of the viewer's own stops."""
        trip = self.find(trip_id)
        if trip is None or self.viewer_id is None:
            return None

        locations = itinerary.remove_location(trip, index, self.viewer_id)
        if len(locations) == len(trip.locations):
            return trip
        return self.save_itinerary(trip_id, locations)

    def share_trip(self, trip: Trip, user_ids: Sequence[str]) -> list[Notification] | None:
        """Invite users to a trip. Shared users change only when an invitee accepts."""
        return self._write(lambda: sharing.share_trip(self._store, trip, user_ids), "Shared trip successfully!")
