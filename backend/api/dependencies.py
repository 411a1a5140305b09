"""
FastAPI dependencies.
"""
from fastapi import Request

from services.provider import ProviderContext


def get_provider(request: Request) -> ProviderContext:
    """Return the ProviderContext registered by create_app."""
    return request.app.state.provider
