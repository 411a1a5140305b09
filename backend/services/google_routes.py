"""Routes API computeRoutes relay."""
from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

from domain.errors import UpstreamError
from domain.models import Coordinate, RouteRequest, RoutesResponse
from services.provider import ProviderContext

logger = logging.getLogger(__name__)

API_NAME = "Google Routes API"
ROUTES_FIELD_MASK = "routes.duration,routes.distanceMeters,routes.polyline.encodedPolyline"

TRAVEL_MODE = "DRIVE"
ROUTING_PREFERENCE = "TRAFFIC_AWARE_OPTIMAL"
COMPUTE_ALTERNATIVE_ROUTES = True
ROUTE_MODIFIERS = {
    "avoidTolls": False,
    "avoidHighways": False,
    "avoidFerries": False,
}
LANGUAGE_CODE = "en-US"
UNITS = "METRIC"


def _waypoint(coord: Coordinate) -> Dict[str, Any]:
    return {
        "location": {
            "latLng": {
                "latitude": coord.latitude,
                "longitude": coord.longitude,
            }
        }
    }


def build_compute_routes_payload(request: RouteRequest) -> Dict[str, Any]:
    return {
        "origin": _waypoint(request.origin_location),
        "destination": _waypoint(request.destination_location),
        "departureTime": request.departure_time,
        "travelMode": TRAVEL_MODE,
        "routingPreference": ROUTING_PREFERENCE,
        "computeAlternativeRoutes": COMPUTE_ALTERNATIVE_ROUTES,
        "routeModifiers": dict(ROUTE_MODIFIERS),
        "languageCode": LANGUAGE_CODE,
        "units": UNITS,
    }


def compute_routes(provider: ProviderContext, request: RouteRequest) -> RoutesResponse:
    """Forward one computeRoutes call and return every candidate route in provider order."""
    data = provider.post_json(
        provider.routes_url,
        build_compute_routes_payload(request),
        field_mask=ROUTES_FIELD_MASK,
        api_name=API_NAME,
    )
    try:
        result = RoutesResponse.model_validate(data)
    except ValidationError as exc:
        logger.error("Error parsing response from %s: %s", API_NAME, exc)
        raise UpstreamError(f"{API_NAME} returned an unexpected shape") from exc
    logger.debug("compute_routes: got %d routes", len(result.routes))
    return result
