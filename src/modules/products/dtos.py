"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  The views
narrow the already rule-checked, untyped request body into one of these
before calling the service.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for a full product replacement.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# CharField(max_length=255)
NAME_MAX_LENGTH = 255
PRICE_QUANTUM = Decimal("0.01")
# DecimalField(max_digits=10, decimal_places=2)
PRICE_LIMIT = Decimal("100000000")


class ProductInputDTO(BaseModel):
    """Fields shared by every product write.

    Validates:
    - ``name`` is a non-empty string that fits the column (numbers are
      accepted as text).
    - ``price`` is rounded to cents and stays greater than zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal

    @field_validator("name", mode="before")
    @classmethod
    def name_accepts_numbers(cls, v: Any) -> Any:
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("name is required")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        v = v.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
        if v <= 0:
            raise ValueError("price must be > 0")
        if v >= PRICE_LIMIT:
            raise ValueError("price is too large")
        return v


class CreateProductDTO(ProductInputDTO):
    """Immutable DTO for product creation requests.

    ``availability`` is optional and defaults to ``True``.
    """

    availability: bool = True


class UpdateProductDTO(ProductInputDTO):
    """Immutable DTO for full product replacement (PUT).

    Every field is required; the stored record is overwritten as a whole.
    """

    availability: bool
