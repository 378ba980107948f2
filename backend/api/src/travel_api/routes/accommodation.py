"""Accommodation endpoints.

Provides REST endpoints for:
- Listing accommodations with optional filters (public)

Accommodation data is loaded from static JSON at startup.
"""

from fastapi import APIRouter, Depends, Query

from travel_api.dependencies import get_catalog
from travel_shared.models import Accommodation, APIResponse
from travel_shared.services.catalog_data import Catalog
from travel_shared.services.filters import ACCOMMODATION_FILTERS, apply_filters

router = APIRouter(tags=["accommodation"])


@router.get(
    "/accommodation",
    summary="List accommodations",
    description="""
List hotels, lodges, camps and villas.

**Public endpoint** - no authentication required.

**Query Parameters** (all optional, combined with AND):
- `country`: Exact country name (case-sensitive), e.g. `Kenya`
- `type`: Exact accommodation type, e.g. `Lodge`, `Boutique Hotel`
- `minPrice`: Minimum price per night (inclusive)
- `maxPrice`: Maximum price per night (inclusive)

**Notes:**
- Results keep the catalog order; there is no sorting or pagination
- Prices are read as leading integers (`150abc` counts as 150); a price
  that does not start with a number matches nothing
- A repeated parameter uses its last value (`?country=Kenya&country=Thailand`
  filters on Thailand)
""",
    response_description="Filtered accommodations wrapped in the response envelope",
    response_model=APIResponse[list[Accommodation]],
    responses={
        200: {
            "description": "Accommodations retrieved (possibly empty)",
        },
    },
)
async def list_accommodations(
    country: str | None = Query(
        default=None,
        description="Exact country name, e.g. Kenya or Tanzania",
    ),
    accommodation_type: str | None = Query(
        default=None,
        alias="type",
        description="Resort, Lodge, Hotel, Villa, Camp or Boutique Hotel",
    ),
    min_price: str | None = Query(
        default=None,
        alias="minPrice",
        description="Minimum price per night",
    ),
    max_price: str | None = Query(
        default=None,
        alias="maxPrice",
        description="Maximum price per night",
    ),
    catalog: Catalog = Depends(get_catalog),
) -> APIResponse[list[Accommodation]]:
    """List accommodations narrowed by the given filters."""
    filters = {
        "country": country,
        "type": accommodation_type,
        "minPrice": min_price,
        "maxPrice": max_price,
    }
    results = apply_filters(catalog.accommodations, filters, ACCOMMODATION_FILTERS)
    return APIResponse[list[Accommodation]].ok(results)
