from typing import Any

from pydantic import BaseModel, field_validator


class UserProfile(BaseModel):
    """Directory entry mirrored from the identity provider."""

    id: str
    email: str | None = None
    firstName: str | None = None
    lastName: str | None = None
    imageUrl: str | None = None

    @field_validator("email", "firstName", "lastName", "imageUrl", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        return value or None

    @property
    def display_name(self) -> str:
        return f"{self.firstName or ''} {self.lastName or ''}".strip()

    def matches(self, query: str) -> bool:
        needle = query.lower()
        return any(needle in (field or "").lower() for field in (self.firstName, self.lastName, self.email))
