from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.models.trip import TripSummary


class Notification(BaseModel):
    id: str
    user_id: str
    trip_id: str | None = None
    message: str
    is_read: bool = False
    accept: bool | None = None
    created_at: datetime

    @field_validator("id", "trip_id", mode="before")
    @classmethod
    def stringify(cls, value: Any) -> Any:
        return value if value is None or isinstance(value, str) else str(value)


class NotificationWithTrip(Notification):
    trip: TripSummary | None = None


class TripShareRequest(BaseModel):
    trip_id: str = Field(..., min_length=1)
    user_ids: list[str] = Field(..., min_length=1)
