"""
Places API routes.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_provider
from api.routes import INVALID_REQUEST_DETAIL, UPSTREAM_FAILURE_DETAIL
from domain.errors import ClientInputError, UpstreamError
from domain.models import PlaceSearchRequest, PlacesResponse
from services import google_places
from services.provider import ProviderContext

router = APIRouter()
logger = logging.getLogger(__name__)


def _search(provider: ProviderContext, text_query: str) -> PlacesResponse:
    try:
        return google_places.search_text(provider, text_query)
    except ClientInputError as exc:
        logger.info("Rejected place search: %s", exc)
        raise HTTPException(status_code=400, detail=INVALID_REQUEST_DETAIL) from exc
    except UpstreamError as exc:
        # Cause already logged by the service layer
        raise HTTPException(status_code=500, detail=UPSTREAM_FAILURE_DETAIL) from exc


@router.post("/places", response_model=PlacesResponse, response_model_exclude_unset=True)
def search_places(
    body: PlaceSearchRequest,
    provider: ProviderContext = Depends(get_provider),
):
    """Text search for places."""
    return _search(provider, body.text_query)


@router.get("/places", response_model=PlacesResponse, response_model_exclude_unset=True)
def search_places_by_query(
    text_query: str = Query(..., alias="textQuery"),
    provider: ProviderContext = Depends(get_provider),
):
    """Text search for places, query-string variant used by older clients."""
    return _search(provider, text_query)
