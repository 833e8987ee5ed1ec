from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _as_str(value: Any) -> Any:
    # uuid ids and the integer cover-image selector arrive as non-strings
    if value is None or isinstance(value, str):
        return value
    return str(value)


class DateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: datetime = Field(..., alias="from")
    to: datetime

    @model_validator(mode="after")
    def from_not_after_to(self) -> "DateRange":
        if self.from_ > self.to:
            raise ValueError("Please select a valid date range")
        return self


class ItineraryLocation(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)
    location: str
    userId: str
    color: str


class SharedUser(BaseModel):
    userId: str = Field(..., min_length=1)


class TripSummary(BaseModel):
    """Trip columns joined onto a notification."""

    id: str
    tripname: str
    country: str
    daterange: DateRange
    ownerid: str
    imageurl: str | None = None
    locations: list[ItineraryLocation] = []
    created_at: datetime | None = None

    @field_validator("id", "imageurl", mode="before")
    @classmethod
    def stringify(cls, value: Any) -> Any:
        return _as_str(value)

    @field_validator("locations", mode="before")
    @classmethod
    def null_locations(cls, value: Any) -> Any:
        return [] if value is None else value


class Trip(TripSummary):
    sharedusers: list[SharedUser] = []

    @field_validator("sharedusers", mode="before")
    @classmethod
    def null_shared_users(cls, value: Any) -> Any:
        return [] if value is None else value

    @model_validator(mode="after")
    def unique_shared_users(self) -> "Trip":
        ids = self.shared_user_ids
        if len(ids) != len(set(ids)):
            raise ValueError("sharedusers must not contain duplicate users")
        return self

    @property
    def shared_user_ids(self) -> list[str]:
        return [shared.userId for shared in self.sharedusers]

    @property
    def member_ids(self) -> list[str]:
        """Owner plus everyone the trip is shared with."""
        return [self.ownerid] + [uid for uid in self.shared_user_ids if uid != self.ownerid]


class TripCreate(BaseModel):
    tripname: str = Field(..., min_length=2, max_length=50)
    country: str = Field(..., min_length=1)
    daterange: DateRange


class TripUpdate(TripCreate):
    tripid: str = Field(..., min_length=1)
