"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for a full-replace update.
- ``ProductOutputDTO``: output with all product fields.

Neither input DTO carries an identifier: IDs are assigned by storage and
never change.  Unknown keys (including a client-supplied ``id``) are
ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class _ProductFieldsDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    maker: str
    price: int
    image: str = ""

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v


class CreateProductDTO(_ProductFieldsDTO):
    """Immutable DTO for product creation requests."""


class UpdateProductDTO(_ProductFieldsDTO):
    """Immutable DTO for product update requests.

    Updates are a full replace: every field is required and overwrites
    the stored value.
    """


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    maker: str
    price: int
    image: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            maker=product.maker,
            price=product.price,
            image=product.image,
        )
