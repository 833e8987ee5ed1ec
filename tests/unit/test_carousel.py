from unittest.mock import MagicMock

import pytest

from core.models import Trip
from core.services.carousel import CARD_GAP, Direction, TripCarousel


@pytest.fixture
def trips(trip_row):
    return [Trip.model_validate({**trip_row, "id": f"trip-{i}", "tripname": f"Trip {i}"}) for i in range(4)]


def test_starts_at_first_trip(trips):
    carousel = TripCarousel(trips, card_width=300)
    assert carousel.index == 0
    assert carousel.selected_trip.id == "trip-0"
    assert not carousel.has_previous
    assert carousel.has_next


def test_empty_carousel():
    carousel = TripCarousel([], card_width=300)
    assert carousel.index is None
    assert carousel.selected_trip is None
    assert not carousel.has_next
    assert not carousel.has_previous
    assert carousel.advance(Direction.FORWARD) == 0


def test_advance_to_end_and_clamp(trips):
    carousel = TripCarousel(trips, card_width=300)

    for _ in range(len(trips) - 1):
        assert carousel.advance(Direction.FORWARD) == 300 + CARD_GAP

    assert carousel.index == len(trips) - 1
    assert not carousel.has_next
    assert carousel.advance(Direction.FORWARD) == 0
    assert carousel.index == len(trips) - 1


def test_backward_at_start_stays(trips):
    carousel = TripCarousel(trips, card_width=200, gap=10)
    assert carousel.advance(Direction.BACKWARD) == 0
    assert carousel.index == 0


def test_backward_scroll_is_negative(trips):
    carousel = TripCarousel(trips, card_width=200, gap=10)
    carousel.advance(Direction.FORWARD)
    assert carousel.advance(Direction.BACKWARD) == -210
    assert carousel.index == 0


def test_on_select_receives_current_trip(trips):
    on_select = MagicMock()
    carousel = TripCarousel(trips, card_width=300, on_select=on_select)

    carousel.advance(Direction.FORWARD)

    on_select.assert_called_once_with(trips[1])
