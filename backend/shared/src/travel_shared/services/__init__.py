"""Backend services for the travel catalog API."""

from .catalog_data import (
    Catalog,
    build_catalog_from_dicts,
    ensure_catalog_loaded,
    get_catalog_data_store,
    load_catalog_from_json,
    set_catalog_data_store,
)
from .filters import (
    ACCOMMODATION_FILTERS,
    EXCURSION_FILTERS,
    PACKAGE_FILTERS,
    TRANSPORT_FILTERS,
    apply_filters,
    find_by_id,
    parse_int_prefix,
)
from .payment_service import PaymentService
from .seat_availability import SeatAvailabilityService
from .transport_search import search_transport

__all__ = [
    "Catalog",
    "build_catalog_from_dicts",
    "ensure_catalog_loaded",
    "get_catalog_data_store",
    "load_catalog_from_json",
    "set_catalog_data_store",
    "ACCOMMODATION_FILTERS",
    "EXCURSION_FILTERS",
    "PACKAGE_FILTERS",
    "TRANSPORT_FILTERS",
    "apply_filters",
    "find_by_id",
    "parse_int_prefix",
    "PaymentService",
    "SeatAvailabilityService",
    "search_transport",
]
