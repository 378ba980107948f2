"""Standard Gauge Railway (SGR) endpoints.

Provides REST endpoints for:
- Checking mock seat availability on an SGR route (public)
"""

from fastapi import APIRouter, Depends, Query

from travel_api.dependencies import get_seat_availability_service
from travel_shared.models import APIResponse, SeatAvailability
from travel_shared.services.seat_availability import SeatAvailabilityService

router = APIRouter(tags=["sgr"])


@router.get(
    "/sgr/availability",
    summary="Check SGR seat availability",
    description="""
Check seat availability on a Standard Gauge Railway route.

**Public endpoint** - no authentication required.

This is a mock: the seat count is a random number between 10 and 59.

**Query Parameters:**
- `routeId`: Route identifier (defaults to `Unknown`)
- `date`: Travel date as YYYY-MM-DD (defaults to today, UTC)
- `class`: Travel class; accepted but does not change the result
""",
    response_description="Seat availability wrapped in the response envelope",
    response_model=APIResponse[SeatAvailability],
)
async def check_availability(
    route_id: str | None = Query(default=None, alias="routeId"),
    travel_date: str | None = Query(default=None, alias="date"),
    travel_class: str | None = Query(default=None, alias="class"),
    service: SeatAvailabilityService = Depends(get_seat_availability_service),
) -> APIResponse[SeatAvailability]:
    """Return mock seat availability."""
    availability = service.check_availability(
        route_id=route_id,
        travel_date=travel_date,
        travel_class=travel_class,
    )
    return APIResponse[SeatAvailability].ok(availability)
