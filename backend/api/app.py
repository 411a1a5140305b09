"""
FastAPI application factory.

The provider context is passed in explicitly so tests can build an app
against a fake session and arbitrary upstream URLs.
"""
import logging
import time
from typing import Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from api.routes import INVALID_REQUEST_DETAIL, places, routes
from services.provider import ProviderContext

logger = logging.getLogger(__name__)


def create_app(
    provider: ProviderContext,
    cors_origins: Sequence[str] = ("*",),
    log_requests: bool = True,
) -> FastAPI:
    app = FastAPI(
        title="Map Relay API",
        description="Place search and route computation relayed to Google Maps Platform",
        version="0.1.0",
    )
    app.state.provider = provider

    # CORS middleware for the map frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(places.router, tags=["places"])
    app.include_router(routes.router, tags=["routes"])

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and missing parameters are plain client errors."""
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"detail": INVALID_REQUEST_DETAIL})

    if log_requests:

        @app.middleware("http")
        async def request_log_middleware(request: Request, call_next):
            """Log method, path, status and latency for every request."""
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            return response

    @app.get("/health-check", response_class=PlainTextResponse)
    async def health_check():
        """Health check endpoint."""
        return "OK"

    return app
