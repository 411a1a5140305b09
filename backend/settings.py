import os
from typing import List

# Basic settings helper to read environment configuration.

DEFAULT_PLACES_URL = "https://places.googleapis.com/v1/places:searchText"
DEFAULT_ROUTES_URL = "https://routes.googleapis.com/directions/v2:computeRoutes"


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: List[str]) -> List[str]:
    if val is None or not val.strip():
        return list(default)
    return [item.strip() for item in val.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        # Required at startup; checked by services.provider.build_provider_context
        self.GOOGLE_MAPS_API_KEY: str | None = os.getenv("GOOGLE_MAPS_API_KEY") or None
        self.GOOGLE_PLACES_URL: str = os.getenv("GOOGLE_PLACES_URL", DEFAULT_PLACES_URL)
        self.GOOGLE_ROUTES_URL: str = os.getenv("GOOGLE_ROUTES_URL", DEFAULT_ROUTES_URL)
        self.UPSTREAM_TIMEOUT_SECONDS: float = float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10"))
        self.CORS_ALLOW_ORIGINS: List[str] = _as_list(os.getenv("CORS_ALLOW_ORIGINS"), ["*"])
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_REQUESTS: bool = _as_bool(os.getenv("LOG_REQUESTS"), True)
        self.HOST: str = os.getenv("HOST", "0.0.0.0")
        self.PORT: int = int(os.getenv("PORT", "3000"))


settings = Settings()
