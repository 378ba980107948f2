"""Transport endpoints.

Provides REST endpoints for:
- Searching transport routes by endpoints and mode (public)

Routes are loaded from static JSON at startup alongside the rest of the
catalog.
"""

from fastapi import APIRouter, Depends, Query

from travel_api.dependencies import get_catalog
from travel_shared.models import APIResponse, TransportSearchResult
from travel_shared.services.catalog_data import Catalog
from travel_shared.services.transport_search import search_transport

router = APIRouter(tags=["transport"])


@router.get(
    "/transport/search",
    summary="Search transport routes",
    description="""
Search flights, SGR trains, buses, ferries and charters between cities.

**Public endpoint** - no authentication required.

**Query Parameters** (all optional):
- `origin`: Departure city of the first segment (case-insensitive substring)
- `destination`: Arrival city of the last segment (case-insensitive substring)
- `mode`: Keep routes with at least one segment of this mode, e.g. `Ferry`

**Notes:**
- `origin` and `destination` only narrow the search when both are given
- Multi-modal routes match on their overall endpoints, so Nairobi to
  Zanzibar finds the flight-and-ferry route via Dar es Salaam
- A repeated parameter uses its last value
""",
    response_description="Matching routes, search ID and timestamp in the response envelope",
    response_model=APIResponse[TransportSearchResult],
    responses={
        200: {
            "description": "Search completed (possibly with no routes)",
        },
    },
)
async def search_routes(
    origin: str | None = Query(
        default=None,
        description="Departure city, e.g. Nairobi",
    ),
    destination: str | None = Query(
        default=None,
        description="Arrival city, e.g. Zanzibar",
    ),
    mode: str | None = Query(
        default=None,
        description="Flight, SGR, Bus, Ferry or Charter",
    ),
    catalog: Catalog = Depends(get_catalog),
) -> APIResponse[TransportSearchResult]:
    """Search the transport routes."""
    filters = {
        "origin": origin,
        "destination": destination,
        "mode": mode,
    }
    result = search_transport(catalog.transport_routes, filters)
    return APIResponse[TransportSearchResult].ok(result)
