import logging
from typing import Callable

from core.db.interface import DataStore
from core.models.notification import NotificationWithTrip
from core.services.notifications import fetch_unread_notifications_by_user, mark_notification_read
from core.services.sharing import respond_to_invitation
from core.state.base import Provider
from core.state.cache import RefreshCache
from core.state.notices import NoticeSink

logger = logging.getLogger(__name__)


class NotificationProvider(Provider):
    """Unread notifications for the viewer.

    Answered notifications are patched in place after the remote update
    succeeds rather than refetched.
    """

    def __init__(
        self,
        store: DataStore,
        viewer_id: str | None,
        notices: NoticeSink | None = None,
        on_trip_joined: Callable[[], None] | None = None,
    ) -> None:
        super().__init__(notices)
        self._store = store
        self.viewer_id = viewer_id
        self.notifications: list[NotificationWithTrip] = []
        self._on_trip_joined = on_trip_joined
        self._cache: RefreshCache[str, list[NotificationWithTrip]] = RefreshCache(
            lambda viewer_id: fetch_unread_notifications_by_user(self._store, viewer_id)
        )

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n.is_read)

    def load(self) -> list[NotificationWithTrip]:
        if self.viewer_id is None:
            logger.info("No signed-in user, skipping notifications")
            return self.notifications

        viewer_id = self.viewer_id
        result = self._read(lambda: self._cache.refresh(viewer_id))
        if result is not None:
            self.notifications = result
        return self.notifications

    def _patch(self, notification_id: str, accept: bool | None) -> None:
        changes: dict[str, object] = {"is_read": True}
        if accept is not None:
            changes["accept"] = accept
        self.notifications = [
            n.model_copy(update=changes) if n.id == notification_id else n for n in self.notifications
        ]
        if self.viewer_id is not None:
            self._cache.set(self.viewer_id, self.notifications)

    def mark_read(self, notification_id: str) -> bool:
        updated = self._write(lambda: mark_notification_read(self._store, notification_id))
        if updated is None:
            return False
        self._patch(notification_id, None)
        return True

    def respond(self, notification: NotificationWithTrip, accept: bool) -> bool:
        """Accept or decline a trip invitation."""
        updated = self._write(lambda: respond_to_invitation(self._store, notification, accept))
        if updated is None:
            return False
        self._patch(notification.id, accept)
        if accept and notification.trip_id and self._on_trip_joined is not None:
            self._on_trip_joined()
        return True
