"""Travel package endpoints.

Provides REST endpoints for:
- Listing packages with optional filters (public)
- Getting a single package by ID (public)
"""

from fastapi import APIRouter, Depends, Query

from travel_api.dependencies import get_catalog
from travel_shared.models import APIResponse, CatalogError, ErrorCode, TravelPackage
from travel_shared.services.catalog_data import Catalog
from travel_shared.services.filters import PACKAGE_FILTERS, apply_filters, find_by_id

router = APIRouter(tags=["packages"])


@router.get(
    "/packages",
    summary="List travel packages",
    description="""
List multi-day travel packages.

**Public endpoint** - no authentication required.

**Query Parameters** (all optional, combined with AND):
- `featured`: `true` to keep featured packages only (any other value is ignored)
- `country`: Keep packages visiting this country (exact match)
- `minDuration`: Minimum length in days (inclusive)
- `maxDuration`: Maximum length in days (inclusive)

A repeated parameter uses its last value.
""",
    response_description="Filtered packages wrapped in the response envelope",
    response_model=APIResponse[list[TravelPackage]],
)
async def list_packages(
    featured: str | None = Query(default=None, description="true = featured only"),
    country: str | None = Query(default=None, description="Country visited"),
    min_duration: str | None = Query(default=None, alias="minDuration"),
    max_duration: str | None = Query(default=None, alias="maxDuration"),
    catalog: Catalog = Depends(get_catalog),
) -> APIResponse[list[TravelPackage]]:
    filters = {
        "featured": featured,
        "country": country,
        "minDuration": min_duration,
        "maxDuration": max_duration,
    }
    results = apply_filters(catalog.packages, filters, PACKAGE_FILTERS)
    return APIResponse[list[TravelPackage]].ok(results)


@router.get(
    "/packages/{package_id}",
    summary="Get package details",
    description="""
Get a single travel package by its ID.

**Public endpoint** - no authentication required.

Returns `NOT_FOUND` (404) when no package has this ID.
""",
    response_description="Package details wrapped in the response envelope",
    response_model=APIResponse[TravelPackage],
    responses={
        200: {
            "description": "Package found",
        },
        404: {
            "description": "Package not found",
            "content": {
                "application/json": {
                    "example": {
                        "success": False,
                        "error": {"code": "NOT_FOUND", "message": "Package not found"},
                        "timestamp": "2026-01-01T00:00:00.000Z",
                    }
                }
            },
        },
    },
)
async def get_package(
    package_id: str,
    catalog: Catalog = Depends(get_catalog),
) -> APIResponse[TravelPackage]:
    """Get package by exact ID."""
    package = find_by_id(catalog.packages, package_id)
    if package is None:
        raise CatalogError(
            ErrorCode.NOT_FOUND,
            message="Package not found",
            details={"package_id": package_id},
        )
    return APIResponse[TravelPackage].ok(package)
