"""Excursion endpoints.

Provides REST endpoints for:
- Listing excursions with optional filters (public)
"""

from fastapi import APIRouter, Depends, Query

from travel_api.dependencies import get_catalog
from travel_shared.models import APIResponse, Excursion
from travel_shared.services.catalog_data import Catalog
from travel_shared.services.filters import EXCURSION_FILTERS, apply_filters

router = APIRouter(tags=["excursions"])


@router.get(
    "/excursions",
    summary="List excursions",
    description="""
List single-day excursions and tours.

**Public endpoint** - no authentication required.

**Query Parameters** (all optional, combined with AND):
- `category`: Safari, Culture, Beach, Adventure, Food & Wine, Wellness (`all` disables the filter)
- `location`: Part of the city name, case-insensitive (`mara` matches `Maasai Mara`)
- `minPrice` / `maxPrice`: Adult price bounds (inclusive)

A repeated parameter uses its last value.
""",
    response_description="Filtered excursions wrapped in the response envelope",
    response_model=APIResponse[list[Excursion]],
)
async def list_excursions(
    category: str | None = Query(default=None),
    location: str | None = Query(default=None),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    catalog: Catalog = Depends(get_catalog),
) -> APIResponse[list[Excursion]]:
    filters = {
        "category": category,
        "location": location,
        "minPrice": min_price,
        "maxPrice": max_price,
    }
    results = apply_filters(catalog.excursions, filters, EXCURSION_FILTERS)
    return APIResponse[list[Excursion]].ok(results)
