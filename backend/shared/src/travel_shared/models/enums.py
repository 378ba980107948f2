"""Enumerations for catalog records and payment states."""

from enum import Enum


class AccommodationType(str, Enum):
    """Accommodation category as published on the site."""

    RESORT = "Resort"
    LODGE = "Lodge"
    HOTEL = "Hotel"
    VILLA = "Villa"
    CAMP = "Camp"
    BOUTIQUE_HOTEL = "Boutique Hotel"


class PackageDifficulty(str, Enum):
    """Physical difficulty of a multi-day package."""

    EASY = "Easy"
    MODERATE = "Moderate"
    CHALLENGING = "Challenging"


class ExcursionCategory(str, Enum):
    """Excursion category."""

    SAFARI = "Safari"
    CULTURE = "Culture"
    BEACH = "Beach"
    ADVENTURE = "Adventure"
    FOOD_AND_WINE = "Food & Wine"
    WELLNESS = "Wellness"


class ExcursionDifficulty(str, Enum):
    """Physical difficulty of a single-day excursion."""

    EASY = "Easy"
    MODERATE = "Moderate"
    STRENUOUS = "Strenuous"


class Currency(str, Enum):
    """Currencies prices are quoted in."""

    USD = "USD"
    KES = "KES"
    TZS = "TZS"


class PaymentStatus(str, Enum):
    """Status reported by the (mock) payment gateway."""

    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class PaymentMethodType(str, Enum):
    """Payment method chosen at checkout."""

    CARD = "card"
    MPESA = "mpesa"
    BANK_TRANSFER = "bank_transfer"


class TransportMode(str, Enum):
    """Mode of travel for one transport segment."""

    FLIGHT = "Flight"
    SGR = "SGR"
    BUS = "Bus"
    FERRY = "Ferry"
    CHARTER = "Charter"


class TransportClass(str, Enum):
    """Seating class sold on a transport segment."""

    ECONOMY = "Economy"
    BUSINESS = "Business"
    FIRST_CLASS = "First Class"
