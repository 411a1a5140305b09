import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from services.provider import ProviderContext  # noqa: E402

PLACES_URL = "https://places.test/v1/places:searchText"
ROUTES_URL = "https://routes.test/directions/v2:computeRoutes"


def upstream_response(payload):
    """A stand-in for requests.Response whose body decodes to ``payload``."""
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def provider(session):
    return ProviderContext(
        api_key="test-key",
        session=session,
        places_url=PLACES_URL,
        routes_url=ROUTES_URL,
        timeout=5.0,
    )


@pytest.fixture
def client(provider):
    from fastapi.testclient import TestClient

    from api.app import create_app

    return TestClient(create_app(provider))
