"""Mock SGR seat availability.

Seat counts are drawn uniformly from ``[MIN_SEATS, MAX_SEATS]``. The random
source is injectable so tests can make the draw deterministic.
"""

import datetime as dt
import random

from travel_shared.models import SeatAvailability

MIN_SEATS = 10
MAX_SEATS = 59
UNKNOWN_ROUTE = "Unknown"


class SeatAvailabilityService:
    """Service producing mock seat availability for SGR routes."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def check_availability(
        self,
        route_id: str | None = None,
        travel_date: str | None = None,
        travel_class: str | None = None,
        now: dt.datetime | None = None,
    ) -> SeatAvailability:
        """Return mock availability for a route and date.

        Args:
            route_id: SGR route identifier. Falls back to ``"Unknown"``.
            travel_date: Date as YYYY-MM-DD. Falls back to today (UTC).
            travel_class: Accepted for API compatibility; does not affect
                the result.
            now: Current time, used for the date fallback.

        Returns:
            SeatAvailability with a seat count in [10, 59].
        """
        if not travel_date:
            now = now or dt.datetime.now(dt.UTC)
            if now.tzinfo is not None:
                now = now.astimezone(dt.UTC)
            travel_date = now.date().isoformat()

        return SeatAvailability(
            available_seats=self.rng.randint(MIN_SEATS, MAX_SEATS),
            route=route_id or UNKNOWN_ROUTE,
            date=travel_date,
        )
