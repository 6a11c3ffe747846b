"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  They are the
contract between the API layer and the Service layer and are immutable
(``frozen=True``).  Request rules have already rejected malformed input by
the time a view builds one; the DTOs coerce the accepted wire values
(numeric strings, ``"true"``/``"1"`` flags) into domain types.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for the full (PUT) update.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator


def _positive(v: Decimal) -> Decimal:
    if v <= 0:
        raise ValueError("Price must be greater than zero.")
    return v


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        return _positive(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Name must not be empty.")
        return v


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for full product updates: every field is overwritten."""

    availability: bool
