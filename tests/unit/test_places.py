from unittest.mock import MagicMock

import pytest
import requests

from core.config import _reset_config
from core.errors import ErrorCode, MappingError
from core.models import NearbySearchQuery
from core.services.places import (
    GEOCODE_URL,
    NEARBY_SEARCH_URL,
    UNKNOWN_LOCATION,
    PlacesClient,
    get_places_client,
)


def _session(payload=None, side_effect=None):
    session = MagicMock()
    if side_effect is not None:
        session.get.side_effect = side_effect
    else:
        response = MagicMock()
        response.json.return_value = payload
        session.get.return_value = response
    return session


def test_nearby_search_passes_through():
    payload = {"results": [{"name": "Time Out Market"}], "status": "OK"}
    session = _session(payload)
    client = PlacesClient("maps-key", session=session)

    result = client.nearby_search(NearbySearchQuery(location="38.7,-9.1", radius=500, type="restaurant"))

    assert result == payload
    session.get.assert_called_once_with(
        NEARBY_SEARCH_URL,
        params={"location": "38.7,-9.1", "radius": 500, "type": "restaurant", "key": "maps-key"},
        timeout=10,
    )


def test_nearby_search_omits_empty_type():
    session = _session({"results": []})
    PlacesClient("maps-key", session=session).nearby_search(NearbySearchQuery(location="1,2"))

    params = session.get.call_args.kwargs["params"]
    assert "type" not in params
    assert params["radius"] == 1500


def test_nearby_search_http_error():
    session = _session(side_effect=requests.ConnectionError("refused"))

    with pytest.raises(MappingError) as exc_info:
        PlacesClient("k", session=session).nearby_search(NearbySearchQuery(location="1,2"))

    assert exc_info.value.code is ErrorCode.PLACES_FAILED


def test_timeout_is_reported_as_timeout():
    session = _session(side_effect=requests.Timeout("slow"))

    with pytest.raises(MappingError) as exc_info:
        PlacesClient("k", session=session).nearby_search(NearbySearchQuery(location="1,2"))

    assert exc_info.value.code is ErrorCode.TIMEOUT


def test_geocode():
    session = _session({"status": "OK", "results": [{"geometry": {"location": {"lat": 39.4, "lng": -8.2}}}]})

    point = PlacesClient("k", session=session).geocode("Portugal")

    assert (point.lat, point.lng) == (39.4, -8.2)
    assert session.get.call_args.args[0] == GEOCODE_URL
    assert session.get.call_args.kwargs["params"]["address"] == "Portugal"


def test_geocode_zero_results():
    session = _session({"status": "ZERO_RESULTS", "results": []})

    with pytest.raises(MappingError) as exc_info:
        PlacesClient("k", session=session).geocode("Atlantis")

    assert exc_info.value.code is ErrorCode.GEOCODING_FAILED
    assert exc_info.value.user_message == "Unable to find location"


def test_reverse_geocode():
    session = _session({"status": "OK", "results": [{"formatted_address": "Praça do Comércio, Lisboa"}]})

    assert PlacesClient("k", session=session).reverse_geocode(38.7, -9.1) == "Praça do Comércio, Lisboa"
    assert session.get.call_args.kwargs["params"]["latlng"] == "38.7,-9.1"


def test_reverse_geocode_failure_falls_back():
    session = _session(side_effect=requests.ConnectionError("down"))
    assert PlacesClient("k", session=session).reverse_geocode(0, 0) == UNKNOWN_LOCATION


def test_reverse_geocode_no_results():
    session = _session({"status": "ZERO_RESULTS", "results": []})
    assert PlacesClient("k", session=session).reverse_geocode(0, 0) == UNKNOWN_LOCATION


def test_get_places_client_requires_key(monkeypatch):
    _reset_config()
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "")
    try:
        with pytest.raises(ValueError, match="GOOGLE_MAPS_API_KEY not configured"):
            get_places_client()
    finally:
        _reset_config()
