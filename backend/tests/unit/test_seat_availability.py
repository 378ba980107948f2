"""Unit tests for the mock SGR seat availability service."""

import datetime as dt
import random

from travel_shared.services.seat_availability import (
    MAX_SEATS,
    MIN_SEATS,
    UNKNOWN_ROUTE,
    SeatAvailabilityService,
)


class TestCheckAvailability:
    """Tests for SeatAvailabilityService.check_availability."""

    def test_seats_within_range(self) -> None:
        service = SeatAvailabilityService(rng=random.Random(99))
        for _ in range(200):
            seats = service.check_availability("NBO-MSA", "2026-03-01").available_seats
            assert MIN_SEATS <= seats <= MAX_SEATS

    def test_range_ends_are_reachable(
        self, high_rng: random.Random, low_rng: random.Random
    ) -> None:
        assert SeatAvailabilityService(rng=high_rng).check_availability().available_seats == 59
        assert SeatAvailabilityService(rng=low_rng).check_availability().available_seats == 10

    def test_echoes_route_and_date(self, seeded_rng: random.Random) -> None:
        result = SeatAvailabilityService(rng=seeded_rng).check_availability(
            "NBO-MSA", "2026-03-01"
        )
        assert result.route == "NBO-MSA"
        assert result.date == "2026-03-01"

    def test_defaults_route_and_date(self, seeded_rng: random.Random) -> None:
        now = dt.datetime(2026, 7, 4, 22, 30, tzinfo=dt.UTC)
        result = SeatAvailabilityService(rng=seeded_rng).check_availability(now=now)
        assert result.route == UNKNOWN_ROUTE
        assert result.date == "2026-07-04"

    def test_default_date_uses_utc(self, seeded_rng: random.Random) -> None:
        """A local time past midnight UTC+3 is still the previous UTC day."""
        nairobi = dt.timezone(dt.timedelta(hours=3))
        now = dt.datetime(2026, 7, 5, 1, 0, tzinfo=nairobi)
        result = SeatAvailabilityService(rng=seeded_rng).check_availability(now=now)
        assert result.date == "2026-07-04"

    def test_travel_class_does_not_change_result(self) -> None:
        economy = SeatAvailabilityService(rng=random.Random(5)).check_availability(
            "NBO-MSA", "2026-03-01", "economy"
        )
        first = SeatAvailabilityService(rng=random.Random(5)).check_availability(
            "NBO-MSA", "2026-03-01", "first"
        )
        assert economy == first
