"""GET /locations/places: nearby-search passthrough to Google Places."""

import logging
from typing import Any

import pydantic

from core.errors import USER_MESSAGES, ErrorCode, MappingError
from core.http import api_handler, json_response, query_params
from core.models.places import NearbySearchQuery
from core.services.places import get_places_client

logger = logging.getLogger(__name__)


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    params = {k: v for k, v in query_params(event).items() if k in ("location", "radius", "type") and v}
    try:
        query = NearbySearchQuery.model_validate(params)
    except pydantic.ValidationError:
        return json_response(400, {"error": USER_MESSAGES[ErrorCode.INVALID_REQUEST]})

    try:
        data = get_places_client().nearby_search(query)
    except MappingError:
        logger.exception("Error fetching data from Google Places API")
        return json_response(500, {"error": USER_MESSAGES[ErrorCode.PLACES_FAILED]})

    return json_response(200, data)
