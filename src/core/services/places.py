"""Google Maps web services: nearby places, geocoding and reverse geocoding."""

import logging
from typing import Any

import requests

from core.clients import get_http_session
from core.errors import ErrorCode, MappingError
from core.models.places import LatLng, NearbySearchQuery

logger = logging.getLogger(__name__)

NEARBY_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
UNKNOWN_LOCATION = "Unknown location"


class PlacesClient:
    def __init__(self, api_key: str, session: requests.Session | None = None, timeout: float = 10) -> None:
        self._api_key = api_key
        self._session = session or get_http_session()
        self._timeout = timeout

    def _get(self, url: str, params: dict[str, Any], code: ErrorCode) -> dict[str, Any]:
        try:
            response = self._session.get(url, params={**params, "key": self._api_key}, timeout=self._timeout)
            response.raise_for_status()
            data: dict[str, Any] = response.json()
            return data
        except requests.Timeout as e:
            raise MappingError(f"Google Maps request timed out: {e}", code=ErrorCode.TIMEOUT) from e
        except (requests.RequestException, ValueError) as e:
            raise MappingError(f"Google Maps request failed: {e}", code=code) from e

    def nearby_search(self, query: NearbySearchQuery) -> dict[str, Any]:
        """Raw nearby-search response, passed through unchanged."""
        params: dict[str, Any] = {"location": query.location.as_param(), "radius": query.radius}
        if query.type:
            params["type"] = query.type
        return self._get(NEARBY_SEARCH_URL, params, ErrorCode.PLACES_FAILED)

    def geocode(self, address: str) -> LatLng:
        """Coordinates for a free-form address, typically a country name."""
        data = self._get(GEOCODE_URL, {"address": address}, ErrorCode.GEOCODING_FAILED)
        if data.get("status") != "OK" or not data.get("results"):
            raise MappingError(
                f"Geocoding {address!r} returned status {data.get('status')}",
                code=ErrorCode.GEOCODING_FAILED,
            )
        location = data["results"][0]["geometry"]["location"]
        return LatLng(lat=location["lat"], lng=location["lng"])

    def reverse_geocode(self, lat: float, lng: float) -> str:
        """Formatted address for a coordinate, or "Unknown location"."""
        try:
            data = self._get(GEOCODE_URL, {"latlng": f"{lat},{lng}"}, ErrorCode.GEOCODING_FAILED)
        except MappingError:
            logger.exception("Error fetching location name for %s,%s", lat, lng)
            return UNKNOWN_LOCATION

        results = data.get("results") or []
        if results:
            return str(results[0].get("formatted_address", UNKNOWN_LOCATION))
        return UNKNOWN_LOCATION


def get_places_client() -> PlacesClient:
    from core.config import get_config

    config = get_config()
    if not config.google_maps_api_key:
        raise ValueError("GOOGLE_MAPS_API_KEY not configured")
    return PlacesClient(api_key=config.google_maps_api_key)
