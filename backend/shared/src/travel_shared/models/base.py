"""Base model shared by every record that crosses the HTTP boundary.

Python attributes are snake_case; JSON payloads use camelCase, matching the
field names the web frontend already consumes (``pricePerNight``,
``transactionId``...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
