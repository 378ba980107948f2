"""Standard Gauge Railway (SGR) seat availability model."""

from pydantic import Field

from .base import CamelModel


class SeatAvailability(CamelModel):
    """Mock seat availability for one SGR route and travel date."""

    available_seats: int = Field(ge=0)
    route: str
    date: str = Field(description="Travel date, YYYY-MM-DD")
