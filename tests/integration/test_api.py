"""Integration tests for the planning, arrivals, places and plan endpoints."""

from collections.abc import Iterator
from datetime import datetime, timedelta
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.planner.api.deps import get_store
from backend.planner.main import app
from backend.planner.storage.store import InMemoryKeyValueStore

SEOUL_STATION = {"lat": 37.5546788, "lng": 126.9709914, "address": "서울특별시 중구", "name": "서울역"}
GANGNAM_STATION = {"lat": 37.4979462, "lng": 127.0276368, "address": "서울특별시 강남구", "name": "강남역"}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Test client with a fresh in-memory store per test."""
    store = InMemoryKeyValueStore()
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRoutes:
    """Route generation endpoints."""

    def test_generate_routes(self, client: TestClient) -> None:
        """Test POST /api/routes returns the three archetypes."""
        response = client.post("/api/routes", json={"origin": SEOUL_STATION, "destination": GANGNAM_STATION})

        assert response.status_code == 200
        routes = response.json()
        assert [(r["id"], r["type"]) for r in routes] == [
            ("route-1", "recommended"),
            ("route-2", "fastest"),
            ("route-3", "cheapest"),
        ]
        assert routes[0]["steps"][0]["from_location"]["name"] == "서울역"

    def test_generate_route_options_with_departure(self, client: TestClient) -> None:
        """Test POST /api/routes/options anchors the timeline at the given time."""
        response = client.post(
            "/api/routes/options",
            json={
                "origin": SEOUL_STATION,
                "destination": GANGNAM_STATION,
                "departure_time": "2024-11-09T13:00:00+00:00",
            },
        )

        assert response.status_code == 200
        for option in response.json():
            departure = datetime.fromisoformat(option["departure_time"])
            arrival = datetime.fromisoformat(option["arrival_time"])
            assert departure == datetime.fromisoformat("2024-11-09T13:00:00+00:00")
            assert arrival - departure == timedelta(minutes=option["total_duration"])
            assert {step["details"]["type"] for step in option["steps"]} <= {"walk", "bus", "subway", "train"}

    def test_missing_coordinates_are_rejected(self, client: TestClient) -> None:
        """Test request validation errors return 422."""
        response = client.post("/api/routes", json={"origin": {"lat": 37.5}, "destination": GANGNAM_STATION})

        assert response.status_code == 422

    def test_cost_breakdown(self, client: TestClient) -> None:
        """Test POST /api/routes/cost estimates a group multi-day trip."""
        options = client.post(
            "/api/routes/options",
            json={"origin": SEOUL_STATION, "destination": GANGNAM_STATION},
        ).json()

        response = client.post(
            "/api/routes/cost",
            json={"route": options[0], "participants": 2, "duration_days": 2},
        )

        assert response.status_code == 200
        breakdown = response.json()
        assert breakdown["accommodation"]["nights"] == 1
        assert breakdown["total"] == (
            breakdown["transportation"]["total"]
            + breakdown["food"]["total"]
            + breakdown["activities"]["total"]
            + breakdown["accommodation"]["total"]
        )

    def test_cost_breakdown_rejects_empty_party(self, client: TestClient) -> None:
        """Test a zero-person party fails validation."""
        options = client.post(
            "/api/routes/options",
            json={"origin": SEOUL_STATION, "destination": GANGNAM_STATION},
        ).json()

        response = client.post("/api/routes/cost", json={"route": options[0], "participants": 0})

        assert response.status_code == 422

    def test_search_routes_without_api_key(self, client: TestClient) -> None:
        """Test POST /api/routes/search falls back to synthesized options."""
        response = client.post(
            "/api/routes/search",
            json={
                "origin": SEOUL_STATION,
                "destination": GANGNAM_STATION,
                "departure_time": "2024-11-09T13:00:00+00:00",
            },
        )

        assert response.status_code == 200
        options = response.json()
        assert [o["type"] for o in options] == ["recommended", "fastest", "cheapest"]
        departure = datetime.fromisoformat("2024-11-09T13:00:00+00:00")
        assert all(datetime.fromisoformat(o["departure_time"]) == departure for o in options)

    def test_search_routes_provider_failure_maps_to_502(self, client: TestClient) -> None:
        """Test directions provider errors surface as 502."""
        with patch(
            "backend.planner.api.routes.planning.search_route",
            side_effect=httpx.ConnectError("connection refused"),
        ):
            response = client.post(
                "/api/routes/search",
                json={"origin": SEOUL_STATION, "destination": GANGNAM_STATION},
            )

        assert response.status_code == 502
        assert "ConnectError" in response.json()["detail"]

    def test_unexpected_error_returns_generic_500(self) -> None:
        """Test unhandled errors are hidden behind a generic body."""
        client = TestClient(app, raise_server_exceptions=False)

        with patch("backend.planner.api.routes.planning.generate_routes", side_effect=RuntimeError("boom")):
            response = client.post("/api/routes", json={"origin": SEOUL_STATION, "destination": GANGNAM_STATION})

        assert response.status_code == 500
        assert response.json() == {"error": "Something went wrong!"}


class TestArrivals:
    """Real-time arrival endpoints (fixture-backed without an API key)."""

    def test_bus_arrivals(self, client: TestClient) -> None:
        response = client.get("/api/arrivals/bus/113000422")

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_bus_arrivals_counted_down_by_elapsed_seconds(self, client: TestClient) -> None:
        """Test predictions age by the elapsed time, never below zero."""
        fresh = client.get("/api/arrivals/bus/113000422").json()
        aged = client.get("/api/arrivals/bus/113000422", params={"elapsed_seconds": 150}).json()

        assert [a["remaining_time"] for a in aged] == [max(0, a["remaining_time"] - 150) for a in fresh]
        assert aged[0]["remaining_time"] == 0

    def test_negative_elapsed_seconds_rejected(self, client: TestClient) -> None:
        response = client.get("/api/arrivals/subway/0239", params={"elapsed_seconds": -1})

        assert response.status_code == 422

    def test_subway_arrivals(self, client: TestClient) -> None:
        response = client.get("/api/arrivals/subway/0239")

        assert response.status_code == 200
        assert response.json()[0]["line"] == "2호선"

    def test_feed_failure_maps_to_502(self, client: TestClient) -> None:
        """Test upstream HTTP errors surface as 502."""
        with patch(
            "backend.planner.api.routes.arrivals.fetch_subway_arrivals",
            side_effect=httpx.ConnectError("connection refused"),
        ):
            response = client.get("/api/arrivals/subway/0239")

        assert response.status_code == 502
        assert "ConnectError" in response.json()["detail"]


class TestPlaces:
    """Place search and recent-search endpoints."""

    def test_search(self, client: TestClient) -> None:
        response = client.get("/api/places/search", params={"q": "부산"})

        assert response.status_code == 200
        assert response.json()["lat"] == 35.1796

    def test_search_not_found(self, client: TestClient) -> None:
        response = client.get("/api/places/search", params={"q": "Atlantis"})

        assert response.status_code == 404

    def test_suggestions(self, client: TestClient) -> None:
        response = client.get("/api/places/suggestions", params={"q": "서울"})

        assert response.json() == ["서울", "서울역"]

    def test_recent_searches(self, client: TestClient) -> None:
        """Test recent searches persist in the injected store."""
        assert client.get("/api/places/recent").json() == []

        client.post("/api/places/recent", json={"address": "서울역"})
        client.post("/api/places/recent", json={"address": "강남역"})
        response = client.post("/api/places/recent", json={"address": "서울역"})

        assert response.json() == ["서울역", "강남역"]
        assert client.get("/api/places/recent").json() == ["서울역", "강남역"]


class TestPlan:
    """Current travel plan endpoints."""

    def test_plan_lifecycle(self, client: TestClient) -> None:
        """Test save, read back, and delete of the current plan."""
        assert client.get("/api/plan").status_code == 404

        plan = {
            "origin": SEOUL_STATION,
            "destination": GANGNAM_STATION,
            "departure_date": "2024-11-09",
            "departure_time": "13:00",
            "duration": 1,
            "participants": 2,
        }
        assert client.put("/api/plan", json=plan).status_code == 200

        stored = client.get("/api/plan").json()
        assert stored["participants"] == 2
        assert stored["origin"]["name"] == "서울역"

        assert client.delete("/api/plan").status_code == 204
        assert client.get("/api/plan").status_code == 404
