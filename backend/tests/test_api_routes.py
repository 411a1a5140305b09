import pytest
import requests
from fastapi import HTTPException

from api.routes import UPSTREAM_FAILURE_DETAIL
from conftest import upstream_response

ROUTE_BODY = {
    "originLocation": {"latitude": 37.419734, "longitude": -122.0827784},
    "destinationLocation": {"latitude": 37.41767, "longitude": -122.079595},
    "departureTime": "2030-10-15T15:01:23.045123456Z",
}


def test_post_routes_returns_all_candidates(client, session):
    upstream = [
        {"distanceMeters": 772, "duration": "165s", "polyline": {"encodedPolyline": "ipkcFfichVnP@j@BLoFVwM"}},
        {"distanceMeters": 910, "duration": "190s", "polyline": {"encodedPolyline": "ipkcFjichVzQ@d@gU"}},
    ]
    session.post.return_value = upstream_response({"routes": upstream, "geocodingResults": {}})

    resp = client.post("/routes", json=ROUTE_BODY)

    assert resp.status_code == 200
    assert resp.json() == {"routes": upstream}
    payload = session.post.call_args.kwargs["json"]
    assert payload["origin"]["location"]["latLng"] == ROUTE_BODY["originLocation"]
    assert payload["destination"]["location"]["latLng"] == ROUTE_BODY["destinationLocation"]
    assert payload["departureTime"] == ROUTE_BODY["departureTime"]
    assert payload["computeAlternativeRoutes"] is True


def test_routes_missing_field_fails_at_boundary(client, session):
    body = {k: v for k, v in ROUTE_BODY.items() if k != "departureTime"}
    resp = client.post("/routes", json=body)
    assert resp.status_code == 400
    session.post.assert_not_called()


def test_routes_connection_refused_is_generic_500(client, session):
    session.post.side_effect = requests.ConnectionError("Connection refused")

    resp = client.post("/routes", json=ROUTE_BODY)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Something went wrong. Try again later"}
    assert session.post.call_count == 1


def test_routes_upstream_error_status_is_500(client, session):
    resp_mock = upstream_response({"error": {"code": 400, "message": "Timestamp must be set to a future time."}})
    resp_mock.raise_for_status.side_effect = requests.HTTPError("400 Client Error")
    session.post.return_value = resp_mock

    resp = client.post("/routes", json=ROUTE_BODY)

    assert resp.status_code == 500
    assert "future" not in resp.text


def test_routes_http_error_chains_the_upstream_error(provider, session):
    from api.routes import routes as routes_router
    from domain.errors import UpstreamError
    from domain.models import RouteRequest

    session.post.side_effect = requests.ConnectionError("Connection refused")
    with pytest.raises(HTTPException) as failed:
        routes_router.compute_routes(RouteRequest.model_validate(ROUTE_BODY), provider=provider)
    assert failed.value.status_code == 500
    assert failed.value.detail == UPSTREAM_FAILURE_DETAIL
    assert isinstance(failed.value.__cause__, UpstreamError)
