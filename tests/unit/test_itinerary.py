import random

import pytest

from core.models import ItineraryLocation, Trip
from core.services.itinerary import MARKER_PALETTE, add_location, marker_color_for, remove_location


@pytest.fixture
def trip(trip_row):
    return Trip.model_validate(trip_row)


def test_existing_contributor_keeps_color(trip):
    assert marker_color_for(trip, "user_owner") == "#1F5986"


def test_new_contributor_gets_palette_color(trip):
    color = marker_color_for(trip, "user_friend", rng=random.Random(3))
    assert color in MARKER_PALETTE


def test_no_trip_gets_palette_color():
    assert marker_color_for(None, "user_owner") in MARKER_PALETTE


def test_add_location_appends_without_mutating(trip):
    locations = add_location(trip, 38.69, -9.21, "Belém", "user_friend", "#89CEFF")

    assert len(locations) == 2
    assert locations[-1] == ItineraryLocation(
        lat=38.69, lng=-9.21, location="Belém", userId="user_friend", color="#89CEFF"
    )
    assert len(trip.locations) == 1


def test_remove_own_location(trip):
    assert remove_location(trip, 0, "user_owner") == []


def test_cannot_remove_someone_elses_location(trip):
    assert remove_location(trip, 0, "user_friend") == trip.locations


def test_remove_out_of_range_is_noop(trip):
    assert remove_location(trip, 5, "user_owner") == trip.locations
