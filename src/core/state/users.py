from functools import partial
from typing import Callable

from core.models.trip import Trip
from core.models.user import UserProfile
from core.services.directory import fetch_user_directory
from core.state.base import Provider
from core.state.notices import NoticeSink

UNKNOWN_USER_NAME = "Unknown"


class UserDirectoryProvider(Provider):
    def __init__(self, fetch: Callable[[], list[UserProfile]], notices: NoticeSink | None = None) -> None:
        super().__init__(notices)
        self._fetch = fetch
        self.users: list[UserProfile] | None = None

    @classmethod
    def from_backend(
        cls,
        backend_url: str,
        token: str | None = None,
        notices: NoticeSink | None = None,
    ) -> "UserDirectoryProvider":
        return cls(partial(fetch_user_directory, backend_url, token), notices)

    def load(self) -> list[UserProfile] | None:
        result = self._read(self._fetch)
        if result is not None:
            self.users = result
        return self.users

    def find_user(self, user_id: str) -> UserProfile:
        for user in self.users or []:
            if user.id == user_id:
                return user
        return UserProfile(id=user_id, firstName=UNKNOWN_USER_NAME)

    def search(self, query: str, exclude_id: str | None = None) -> list[UserProfile]:
        """Share-form candidates: name or email contains ``query``, viewer excluded."""
        return [u for u in self.users or [] if u.id != exclude_id and u.matches(query)]

    def participants_for(self, trip: Trip) -> list[UserProfile]:
        """Directory entries for the trip owner and everyone it is shared with."""
        members = set(trip.member_ids)
        return [u for u in self.users or [] if u.id in members]
