"""Shared access to the Google Maps Platform HTTP APIs.

A single ProviderContext is built at startup and handed to every request
handler. It owns the outbound requests.Session and the API key, and exposes
the one POST helper both translators go through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from domain.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Goog-Api-Key"
FIELD_MASK_HEADER = "X-Goog-FieldMask"
JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class ProviderContext:
    api_key: str
    session: requests.Session
    places_url: str
    routes_url: str
    timeout: float = 10.0

    def headers(self, field_mask: str) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self.api_key,
            FIELD_MASK_HEADER: field_mask,
            "Content-Type": JSON_CONTENT_TYPE,
        }

    def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        *,
        field_mask: str,
        api_name: str,
    ) -> Any:
        """POST ``payload`` once and return the decoded JSON body.

        Transport errors, non-2xx answers and undecodable bodies raise
        UpstreamError; the cause is logged here and chained on the exception.
        """
        try:
            resp = self.session.post(
                url,
                json=payload,
                headers=self.headers(field_mask),
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.error("Error sending request to %s: %s", api_name, exc)
            raise UpstreamError(f"{api_name} request failed") from exc

        try:
            return resp.json()
        except ValueError as exc:
            logger.error("Error parsing response from %s: %s", api_name, exc)
            raise UpstreamError(f"{api_name} returned a non-JSON body") from exc


def build_provider_context(settings, session: Optional[requests.Session] = None) -> ProviderContext:
    """Create the process-wide provider context from Settings.

    Raises ConfigurationError when the API key is missing so the process
    aborts before it starts listening.
    """
    if not settings.GOOGLE_MAPS_API_KEY:
        raise ConfigurationError("GOOGLE_MAPS_API_KEY environment variable not set")
    return ProviderContext(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        session=session or requests.Session(),
        places_url=settings.GOOGLE_PLACES_URL,
        routes_url=settings.GOOGLE_ROUTES_URL,
        timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )
