"""Transport route models.

A route is one or more segments travelled in order; origin and destination
are the first segment's departure city and the last segment's arrival city.
"""

from pydantic import Field

from .base import CamelModel
from .catalog import Location
from .enums import TransportClass, TransportMode


class TransportSegment(CamelModel):
    """One leg of a route, operated by a single carrier."""

    id: str
    mode: TransportMode
    operator: str
    departure_location: Location
    arrival_location: Location
    departure_time: str = Field(description="Local departure time, HH:MM")
    arrival_time: str = Field(description="Local arrival time, HH:MM")
    duration: int = Field(ge=0, description="Duration in minutes")
    travel_class: TransportClass = Field(alias="class")
    price: float = Field(ge=0)
    available_seats: int = Field(ge=0)
    amenities: list[str] = Field(default_factory=list)


class TransportRoute(CamelModel):
    """Bookable route made of one or more segments."""

    id: str
    name: str
    slug: str
    segments: list[TransportSegment] = Field(min_length=1)
    total_duration: int = Field(ge=0, description="Total duration in minutes")
    total_price: float = Field(ge=0)
    is_multi_modal: bool = False

    @property
    def origin(self) -> Location:
        return self.segments[0].departure_location

    @property
    def destination(self) -> Location:
        return self.segments[-1].arrival_location


class TransportSearchResult(CamelModel):
    """Routes matching a transport search."""

    routes: list[TransportRoute]
    search_id: str = Field(description="Identifier of this search, search-<epoch ms>")
    timestamp: str
