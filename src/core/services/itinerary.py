"""Itinerary marker helpers."""

import random

from core.models.trip import ItineraryLocation, Trip

# Each contributor keeps one pin color per trip, drawn from this palette.
MARKER_PALETTE: tuple[str, ...] = (
    "#0A2342",
    "#143D59",
    "#1F5986",
    "#2A76B3",
    "#348CD3",
    "#4DA3E6",
    "#67BBF9",
    "#89CEFF",
    "#A4DBFF",
    "#C0E8FF",
)


def marker_color_for(trip: Trip | None, user_id: str, rng: random.Random | None = None) -> str:
    if trip is not None:
        for loc in trip.locations:
            if loc.userId == user_id:
                return loc.color
    return (rng or random).choice(MARKER_PALETTE)


def add_location(
    trip: Trip,
    lat: float,
    lng: float,
    name: str,
    user_id: str,
    color: str,
) -> list[ItineraryLocation]:
    """The trip's locations with one more stop appended. The trip is not modified."""
    stop = ItineraryLocation(lat=lat, lng=lng, location=name, userId=user_id, color=color)
    return [*trip.locations, stop]


def remove_location(trip: Trip, index: int, user_id: str) -> list[ItineraryLocation]:
    """Drop the stop at ``index`` if ``user_id`` placed it; otherwise return the list unchanged."""
    return [
        loc for i, loc in enumerate(trip.locations) if i != index or loc.userId != user_id
    ]
