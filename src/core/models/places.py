"""Pydantic models for the mapping provider."""

from pydantic import BaseModel, Field, field_validator


class LatLng(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    def as_param(self) -> str:
        return f"{self.lat},{self.lng}"


class NearbySearchQuery(BaseModel):
    location: LatLng
    radius: int = Field(default=1500, gt=0)
    type: str | None = None

    @field_validator("location", mode="before")
    @classmethod
    def parse_location(cls, value: object) -> object:
        if isinstance(value, str):
            parts = value.split(",")
            if len(parts) != 2:
                raise ValueError("location must be '<lat>,<lng>'")
            return {"lat": parts[0].strip(), "lng": parts[1].strip()}
        return value
