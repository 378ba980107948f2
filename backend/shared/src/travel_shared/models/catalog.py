"""Catalog models for accommodations, packages, and excursions.

These records are read-only reference data loaded from the bundled JSON
datasets at startup. Nothing in the API creates or mutates them.
"""

from pydantic import Field, field_validator

from .base import CamelModel
from .enums import (
    AccommodationType,
    Currency,
    ExcursionCategory,
    ExcursionDifficulty,
    PackageDifficulty,
)


class Coordinates(CamelModel):
    """Geographic coordinates."""

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class Location(CamelModel):
    """Where a record is situated."""

    country: str
    city: str
    region: str | None = None
    coordinates: Coordinates | None = None


class Image(CamelModel):
    """Image reference with an optional cinematic aspect ratio."""

    url: str
    alt: str
    aspect_ratio: str | None = None
    credit: str | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v


class PriceBreakdown(CamelModel):
    """Price breakdown shown on package pages."""

    base_price: float = Field(ge=0)
    service_fee: float = Field(default=0, ge=0)
    taxes: float = Field(default=0, ge=0)
    discount: float | None = None
    total: float = Field(ge=0)
    currency: Currency = Currency.USD


class Amenity(CamelModel):
    """Accommodation amenity."""

    name: str
    icon: str
    available: bool = True


class RoomType(CamelModel):
    """Bookable room type within an accommodation."""

    type: str
    capacity: int = Field(ge=1)
    price_per_night: float = Field(ge=0)
    available: bool = True
    bed_type: str | None = None
    image: Image | None = None


class Accommodation(CamelModel):
    """Hotel, lodge, camp or villa listed on the site."""

    id: str
    name: str
    slug: str
    type: AccommodationType
    description: str
    location: Location
    star_rating: int = Field(ge=0, le=5)
    amenities: list[Amenity] = Field(default_factory=list)
    room_types: list[RoomType] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)
    price_per_night: float = Field(ge=0)
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    featured: bool = False
    check_in_time: str = "14:00"
    check_out_time: str = "10:00"


class ItineraryDay(CamelModel):
    """One day of a package itinerary."""

    day: int = Field(ge=1)
    title: str
    description: str
    activities: list[str] = Field(default_factory=list)
    accommodation: str | None = None
    meals: list[str] = Field(default_factory=list)


class TravelPackage(CamelModel):
    """Multi-day travel package."""

    id: str
    title: str
    slug: str
    subtitle: str
    description: str
    duration: int = Field(ge=1, description="Length in days")
    max_group_size: int = Field(ge=1)
    difficulty: PackageDifficulty
    locations: list[Location] = Field(default_factory=list)
    itinerary: list[ItineraryDay] = Field(default_factory=list)
    inclusions: list[str] = Field(default_factory=list)
    exclusions: list[str] = Field(default_factory=list)
    price: PriceBreakdown
    images: list[Image] = Field(default_factory=list)
    highlights: list[str] = Field(default_factory=list)
    best_seasons: list[str] = Field(default_factory=list)
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    featured: bool = False


class ExcursionStep(CamelModel):
    """Timeline entry of an excursion."""

    time: str
    activity: str


class Excursion(CamelModel):
    """Single-day activity or tour."""

    id: str
    title: str
    slug: str
    category: ExcursionCategory
    description: str
    duration: float = Field(gt=0, description="Length in hours")
    location: Location
    price: float = Field(ge=0, description="Adult price")
    child_price: float | None = None
    images: list[Image] = Field(default_factory=list)
    included: list[str] = Field(default_factory=list)
    not_included: list[str] = Field(default_factory=list)
    max_participants: int = Field(ge=1)
    min_age: int | None = None
    difficulty_level: ExcursionDifficulty
    available_times: list[str] = Field(default_factory=list)
    itinerary: list[ExcursionStep] | None = None
    requirements: list[str] | None = None
    languages: list[str] | None = None
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    featured: bool = False
    highlights: list[str] = Field(default_factory=list)
