"""
Routes API routes.
"""
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_provider
from api.routes import UPSTREAM_FAILURE_DETAIL
from domain.errors import UpstreamError
from domain.models import RouteRequest, RoutesResponse
from services import google_routes
from services.provider import ProviderContext

router = APIRouter()


@router.post("/routes", response_model=RoutesResponse)
def compute_routes(
    body: RouteRequest,
    provider: ProviderContext = Depends(get_provider),
):
    """Driving routes, including alternatives, between two coordinates."""
    try:
        return google_routes.compute_routes(provider, body)
    except UpstreamError as exc:
        # Cause already logged by the service layer
        raise HTTPException(status_code=500, detail=UPSTREAM_FAILURE_DETAIL) from exc
