"""
Wire models shared by the client-facing API and the Google Maps Platform calls.

Field names are snake_case in Python and camelCase on the wire. Unknown
upstream fields are ignored, and optional fields the provider leaves out stay
unset so they are omitted again when the model is serialized with
``exclude_unset``.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Coordinate(_WireModel):
    latitude: float
    longitude: float


class DisplayName(_WireModel):
    text: str
    language_code: Optional[str] = Field(default=None, alias="languageCode")


class Place(_WireModel):
    id: str
    formatted_address: str = Field(alias="formattedAddress")
    price_level: Optional[str] = Field(default=None, alias="priceLevel")  # e.g. "PRICE_LEVEL_MODERATE"
    display_name: DisplayName = Field(alias="displayName")
    location: Coordinate


class PlaceSearchRequest(_WireModel):
    text_query: str = Field(alias="textQuery")


class PlacesResponse(_WireModel):
    # None means the provider found nothing; it is kept distinct from []
    places: Optional[List[Place]] = None


class RouteRequest(_WireModel):
    origin_location: Coordinate = Field(alias="originLocation")
    destination_location: Coordinate = Field(alias="destinationLocation")
    departure_time: str = Field(alias="departureTime")  # RFC 3339, forwarded as-is


class Polyline(_WireModel):
    encoded_polyline: str = Field(alias="encodedPolyline")


class Route(_WireModel):
    distance_meters: float = Field(alias="distanceMeters")
    duration: str  # provider format, e.g. "165s"
    polyline: Polyline


class RoutesResponse(_WireModel):
    routes: List[Route]
