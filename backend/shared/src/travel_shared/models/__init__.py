"""Pydantic models for travel catalog records and API payloads."""

from .base import CamelModel
from .catalog import (
    Accommodation,
    Amenity,
    Coordinates,
    Excursion,
    ExcursionStep,
    Image,
    ItineraryDay,
    Location,
    PriceBreakdown,
    RoomType,
    TravelPackage,
)
from .enums import (
    AccommodationType,
    Currency,
    ExcursionCategory,
    ExcursionDifficulty,
    PackageDifficulty,
    PaymentMethodType,
    PaymentStatus,
    TransportClass,
    TransportMode,
)
from .envelope import APIResponse, ErrorDetail, iso_timestamp
from .errors import ERROR_MESSAGES, CatalogError, ErrorCode
from .payment import (
    PaymentMethod,
    PaymentProcessRequest,
    PaymentResponse,
    PaymentVerifyRequest,
)
from .sgr import SeatAvailability
from .transport import TransportRoute, TransportSearchResult, TransportSegment

__all__ = [
    # Base
    "CamelModel",
    # Enums
    "AccommodationType",
    "Currency",
    "ExcursionCategory",
    "ExcursionDifficulty",
    "PackageDifficulty",
    "PaymentMethodType",
    "PaymentStatus",
    "TransportClass",
    "TransportMode",
    # Catalog
    "Accommodation",
    "Amenity",
    "Coordinates",
    "Excursion",
    "ExcursionStep",
    "Image",
    "ItineraryDay",
    "Location",
    "PriceBreakdown",
    "RoomType",
    "TravelPackage",
    # Envelope
    "APIResponse",
    "ErrorDetail",
    "iso_timestamp",
    # Errors
    "CatalogError",
    "ErrorCode",
    "ERROR_MESSAGES",
    # Payment
    "PaymentMethod",
    "PaymentProcessRequest",
    "PaymentResponse",
    "PaymentVerifyRequest",
    # SGR
    "SeatAvailability",
    # Transport
    "TransportRoute",
    "TransportSearchResult",
    "TransportSegment",
]
