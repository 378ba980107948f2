"""API routes package.

This package contains FastAPI routers for all REST API endpoints.
Routers are organized by domain:

- health: Health check
- accommodation: Accommodation listing with filters
- packages: Package listing and detail lookup
- excursions: Excursion listing with filters
- payments: Mock payment verification and processing
- sgr: Mock SGR seat availability
- transport: Transport route search

All routers are registered in main.py under the configured prefix (/api).
"""

from travel_api.routes.accommodation import router as accommodation_router
from travel_api.routes.excursions import router as excursions_router
from travel_api.routes.health import router as health_router
from travel_api.routes.packages import router as packages_router
from travel_api.routes.payments import router as payments_router
from travel_api.routes.sgr import router as sgr_router
from travel_api.routes.transport import router as transport_router

__all__ = [
    "accommodation_router",
    "excursions_router",
    "health_router",
    "packages_router",
    "payments_router",
    "sgr_router",
    "transport_router",
]
