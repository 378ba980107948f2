"""FastAPI dependency injection providers for shared services.

Services are stateless (apart from their randomness source) and cached with
@lru_cache so each process builds them once.

Usage in routes:
    from travel_api.dependencies import get_catalog

    @router.get("/accommodation")
    async def list_accommodations(catalog: Catalog = Depends(get_catalog)):
        ...

Testing:
    Inject a catalog with ``set_catalog_data_store``, or override any
    provider through ``app.dependency_overrides``. Use reset_services() to
    clear cached instances between tests.
"""

from functools import lru_cache

from fastapi import Depends, Request

from travel_api.settings import ApiSettings, get_settings
from travel_shared.services.catalog_data import Catalog, ensure_catalog_loaded
from travel_shared.services.payment_service import PaymentService
from travel_shared.services.seat_availability import SeatAvailabilityService


def get_app_settings(request: Request) -> ApiSettings:
    """Get the settings the running app was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_catalog(settings: ApiSettings = Depends(get_app_settings)) -> Catalog:
    """Get the read-only catalog, loading it on first use.

    Returns:
        Catalog from the configured data directory, or the bundled datasets.
    """
    return ensure_catalog_loaded(settings.catalog_data_dir)


@lru_cache
def get_payment_service() -> PaymentService:
    """Get cached PaymentService instance (mock gateway)."""
    return PaymentService()


@lru_cache
def get_seat_availability_service() -> SeatAvailabilityService:
    """Get cached SeatAvailabilityService instance."""
    return SeatAvailabilityService()


def reset_services() -> None:
    """Clear all cached service instances and the loaded catalog.

    Example:
        @pytest.fixture(autouse=True)
        def reset_state():
            yield
            reset_services()
    """
    from travel_shared.services.catalog_data import set_catalog_data_store

    get_payment_service.cache_clear()
    get_seat_availability_service.cache_clear()
    set_catalog_data_store(None)
