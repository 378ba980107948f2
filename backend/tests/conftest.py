"""Pytest configuration and fixtures for the travel catalog backend tests.

This module provides reusable fixtures for testing:
- Small hand-written catalog datasets (camelCase dicts, as in the JSON files)
- Catalog injection and state reset between tests
- FastAPI test clients bound to the sample or bundled catalog
- Deterministic randomness for the mock services
"""

import os
import random
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

# === Environment Setup ===

# Set environment variables for testing before the app module is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("API_PREFIX", "/api")
os.environ.setdefault("LOG_LEVEL", "INFO")

from travel_api.dependencies import reset_services  # noqa: E402
from travel_api.main import app  # noqa: E402
from travel_api.settings import get_settings  # noqa: E402
from travel_shared.services.catalog_data import (  # noqa: E402
    Catalog,
    build_catalog_from_dicts,
    load_catalog_from_json,
    set_catalog_data_store,
)


# === Record Builders ===


def make_accommodation(
    acc_id: str,
    country: str,
    price: float,
    acc_type: str = "Lodge",
    city: str = "Nairobi",
    **overrides: Any,
) -> dict[str, Any]:
    """Build a minimal valid accommodation record."""
    record: dict[str, Any] = {
        "id": acc_id,
        "name": f"Accommodation {acc_id}",
        "slug": acc_id,
        "type": acc_type,
        "description": "Test accommodation",
        "location": {"country": country, "city": city},
        "starRating": 4,
        "pricePerNight": price,
        "rating": 4.5,
    }
    record.update(overrides)
    return record


def make_package(
    pkg_id: str,
    duration: int,
    countries: list[str],
    featured: bool = False,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a minimal valid travel package record."""
    record: dict[str, Any] = {
        "id": pkg_id,
        "title": f"Package {pkg_id}",
        "slug": pkg_id,
        "subtitle": "Test package",
        "description": "Test package",
        "duration": duration,
        "maxGroupSize": 8,
        "difficulty": "Easy",
        "locations": [{"country": c, "city": f"{c} City"} for c in countries],
        "price": {"basePrice": 100 * duration, "total": 100 * duration},
        "rating": 4.7,
        "featured": featured,
    }
    record.update(overrides)
    return record


def make_excursion(
    exc_id: str,
    category: str,
    city: str,
    price: float,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a minimal valid excursion record."""
    record: dict[str, Any] = {
        "id": exc_id,
        "title": f"Excursion {exc_id}",
        "slug": exc_id,
        "category": category,
        "description": "Test excursion",
        "duration": 4,
        "location": {"country": "Kenya", "city": city},
        "price": price,
        "maxParticipants": 12,
        "difficultyLevel": "Easy",
        "rating": 4.8,
    }
    record.update(overrides)
    return record


def make_transport_route(
    route_id: str,
    legs: list[tuple[str, str, str]],
    **overrides: Any,
) -> dict[str, Any]:
    """Build a valid transport route from (mode, from city, to city) legs."""
    segments = [
        {
            "id": f"{route_id}-seg-{index}",
            "mode": mode,
            "operator": f"{mode} Operator",
            "departureLocation": {"country": "Kenya", "city": origin},
            "arrivalLocation": {"country": "Kenya", "city": destination},
            "departureTime": "08:00",
            "arrivalTime": "09:00",
            "duration": 60,
            "class": "Economy",
            "price": 50,
            "availableSeats": 20,
        }
        for index, (mode, origin, destination) in enumerate(legs, start=1)
    ]
    record: dict[str, Any] = {
        "id": route_id,
        "name": f"Route {route_id}",
        "slug": route_id,
        "segments": segments,
        "totalDuration": 60 * len(segments),
        "totalPrice": 50 * len(segments),
        "isMultiModal": len({mode for mode, _, _ in legs}) > 1,
    }
    record.update(overrides)
    return record


# === Sample Data Fixtures ===


@pytest.fixture
def sample_accommodations() -> list[dict[str, Any]]:
    """Accommodations across three countries, in a fixed order."""
    return [
        make_accommodation("acc-th-1", "Thailand", 80, acc_type="Resort", city="Phuket"),
        make_accommodation("acc-ke-1", "Kenya", 180, acc_type="Lodge"),
        make_accommodation("acc-th-2", "Thailand", 30, acc_type="Hotel", city="Bangkok"),
        make_accommodation("acc-tz-1", "Tanzania", 450, acc_type="Camp", city="Arusha"),
        make_accommodation("acc-ke-2", "Kenya", 50, acc_type="Hotel", city="Mombasa"),
    ]


@pytest.fixture
def sample_packages() -> list[dict[str, Any]]:
    """Packages with a mix of durations, countries and featured flags."""
    return [
        make_package("pkg-1", 3, ["Kenya"], featured=True),
        make_package("pkg-2", 7, ["Kenya", "Tanzania"]),
        make_package("pkg-3", 5, ["Tanzania"], featured=True),
        make_package("pkg-4", 2, ["Kenya"]),
    ]


@pytest.fixture
def sample_excursions() -> list[dict[str, Any]]:
    """Excursions in several categories and cities."""
    return [
        make_excursion("exc-1", "Safari", "Nairobi", 95),
        make_excursion("exc-2", "Beach", "Diani Beach", 120),
        make_excursion("exc-3", "Safari", "Maasai Mara", 300),
        make_excursion("exc-4", "Culture", "Mombasa", 40),
    ]


@pytest.fixture
def sample_transport_routes() -> list[dict[str, Any]]:
    """Direct and multi-modal routes between Kenyan and Tanzanian cities."""
    return [
        make_transport_route("rt-flight", [("Flight", "Nairobi", "Mombasa")]),
        make_transport_route(
            "rt-multi",
            [("Flight", "Nairobi", "Dar es Salaam"), ("Ferry", "Dar es Salaam", "Zanzibar")],
        ),
        make_transport_route("rt-ferry", [("Ferry", "Dar es Salaam", "Zanzibar")]),
        make_transport_route("rt-bus", [("Bus", "Mombasa", "Diani Beach")]),
    ]


@pytest.fixture
def sample_catalog(
    sample_accommodations: list[dict[str, Any]],
    sample_packages: list[dict[str, Any]],
    sample_excursions: list[dict[str, Any]],
    sample_transport_routes: list[dict[str, Any]],
) -> Catalog:
    """Catalog built from the sample records."""
    return build_catalog_from_dicts(
        accommodations=sample_accommodations,
        packages=sample_packages,
        excursions=sample_excursions,
        transport_routes=sample_transport_routes,
    )


@pytest.fixture
def bundled_catalog() -> Catalog:
    """Catalog loaded from the JSON files shipped with travel_shared."""
    return load_catalog_from_json()


# === State Reset ===


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Reset cached services, settings, overrides and the catalog after each test."""
    yield
    app.dependency_overrides.clear()
    reset_services()
    get_settings.cache_clear()


# === API Clients ===


@pytest.fixture
def client(sample_catalog: Catalog) -> TestClient:
    """Test client serving the sample catalog."""
    set_catalog_data_store(sample_catalog)
    return TestClient(app)


@pytest.fixture
def bundled_client(bundled_catalog: Catalog) -> TestClient:
    """Test client serving the bundled catalog."""
    set_catalog_data_store(bundled_catalog)
    return TestClient(app)


# === Randomness ===


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


class FixedRandom(random.Random):
    """Random source whose randint always returns one end of the range."""

    def __init__(self, pick_high: bool) -> None:
        super().__init__(0)
        self.pick_high = pick_high

    def randint(self, a: int, b: int) -> int:
        return b if self.pick_high else a


@pytest.fixture
def high_rng() -> random.Random:
    """Random source pinned to the top of every range."""
    return FixedRandom(pick_high=True)


@pytest.fixture
def low_rng() -> random.Random:
    """Random source pinned to the bottom of every range."""
    return FixedRandom(pick_high=False)
