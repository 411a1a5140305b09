"""
Places API (New) text search relay.

Request shape sent upstream:

    POST https://places.googleapis.com/v1/places:searchText
    X-Goog-FieldMask: places.id,places.displayName,places.formattedAddress,places.location
    {"textQuery": "Spicy Vegetarian Food in Sydney, Australia", "maxResultCount": "10"}
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

from domain.errors import ClientInputError, UpstreamError
from domain.models import PlacesResponse
from services.provider import ProviderContext

logger = logging.getLogger(__name__)

API_NAME = "Google Places API"
PLACES_FIELD_MASK = "places.id,places.displayName,places.formattedAddress,places.location"
MAX_RESULT_COUNT = "10"

# What a JS client sends when it stringifies an unset field
UNSET_CLIENT_VALUE = "undefined"


def validate_text_query(text_query: str | None) -> str:
    if not text_query:
        raise ClientInputError("textQuery must not be empty")
    if UNSET_CLIENT_VALUE in text_query:
        raise ClientInputError(f"textQuery must not contain {UNSET_CLIENT_VALUE!r}")
    return text_query


def build_text_search_payload(text_query: str) -> Dict[str, Any]:
    # TODO: add locationBias once clients send their map viewport.
    return {
        "textQuery": text_query,
        "maxResultCount": MAX_RESULT_COUNT,
    }


def search_text(provider: ProviderContext, text_query: str) -> PlacesResponse:
    """Validate ``text_query``, run one text search and map the result.

    Raises ClientInputError before any network traffic for a rejected query
    and UpstreamError for anything that goes wrong with the provider.
    """
    query = validate_text_query(text_query)
    data = provider.post_json(
        provider.places_url,
        build_text_search_payload(query),
        field_mask=PLACES_FIELD_MASK,
        api_name=API_NAME,
    )
    try:
        parsed = PlacesResponse.model_validate(data)
    except ValidationError as exc:
        logger.error("Error parsing response from %s: %s", API_NAME, exc)
        raise UpstreamError(f"{API_NAME} returned an unexpected shape") from exc

    # Always set ``places`` so an empty search serializes as null, not {}
    result = PlacesResponse(places=parsed.places)
    logger.debug(
        "search_text: query=%r got %d places",
        query,
        len(result.places) if result.places is not None else 0,
    )
    return result
