"""Unit tests for transport API routes.

Tests for:
- GET /transport/search - Route search by endpoints and mode
"""

import re
import time

from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK

SEARCH_ID_RE = re.compile(r"^search-(\d+)$")


def route_ids(response) -> list[str]:
    return [r["id"] for r in response.json()["data"]["routes"]]


class TestSearchTransport:
    """Tests for GET /transport/search endpoint (sample catalog)."""

    def test_returns_all_routes_without_parameters(self, client: TestClient) -> None:
        response = client.get("/api/transport/search")
        assert response.status_code == HTTP_200_OK

        body = response.json()
        assert body["success"] is True
        assert set(body["data"]) == {"routes", "searchId", "timestamp"}
        assert route_ids(response) == ["rt-flight", "rt-multi", "rt-ferry", "rt-bus"]

    def test_search_id_is_epoch_millis(self, client: TestClient) -> None:
        before = int(time.time() * 1000)
        response = client.get("/api/transport/search")
        after = int(time.time() * 1000)

        data = response.json()["data"]
        match = SEARCH_ID_RE.match(data["searchId"])
        assert match is not None
        assert before <= int(match.group(1)) <= after
        assert data["timestamp"].endswith("Z")

    def test_origin_and_destination(self, client: TestClient) -> None:
        """Nairobi to Zanzibar finds the flight-and-ferry route."""
        response = client.get(
            "/api/transport/search", params={"origin": "Nairobi", "destination": "zanzibar"}
        )
        assert route_ids(response) == ["rt-multi"]

    def test_origin_alone_is_ignored(self, client: TestClient) -> None:
        response = client.get("/api/transport/search", params={"origin": "Mombasa"})
        assert len(route_ids(response)) == 4

    def test_mode(self, client: TestClient) -> None:
        response = client.get("/api/transport/search", params={"mode": "Flight"})
        assert route_ids(response) == ["rt-flight", "rt-multi"]

    def test_unknown_mode_returns_empty_routes(self, client: TestClient) -> None:
        """An unknown mode is not a validation error."""
        response = client.get("/api/transport/search", params={"mode": "Hovercraft"})
        assert response.status_code == HTTP_200_OK
        assert route_ids(response) == []

    def test_segments_use_wire_names(self, client: TestClient) -> None:
        """Segment fields are camelCase and the class field is named "class"."""
        response = client.get("/api/transport/search", params={"mode": "Bus"})
        segment = response.json()["data"]["routes"][0]["segments"][0]

        assert segment["class"] == "Economy"
        assert segment["departureLocation"]["city"] == "Mombasa"
        assert segment["arrivalLocation"]["city"] == "Diani Beach"
        assert "travelClass" not in segment


class TestSearchTransportBundled:
    """Transport search over the bundled dataset."""

    def test_nairobi_to_mombasa(self, bundled_client: TestClient) -> None:
        response = bundled_client.get(
            "/api/transport/search", params={"origin": "Nairobi", "destination": "Mombasa"}
        )
        assert route_ids(response) == ["route-001-flight", "route-001-sgr", "route-001-sgr-first"]

    def test_ferries(self, bundled_client: TestClient) -> None:
        response = bundled_client.get("/api/transport/search", params={"mode": "Ferry"})
        assert route_ids(response) == ["route-002", "route-008-ferry"]

    def test_dar_to_zanzibar_by_flight(self, bundled_client: TestClient) -> None:
        response = bundled_client.get(
            "/api/transport/search",
            params={"origin": "dar es salaam", "destination": "Zanzibar", "mode": "Flight"},
        )
        assert route_ids(response) == ["route-008-flight"]
