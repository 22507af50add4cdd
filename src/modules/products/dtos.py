"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``) and use camelCase aliases
on the wire (``sellerName``, ``createdAt``); snake_case names are
accepted on input as well.

- ``ProductRequestDTO``: input for product creation and replacement.
- ``ProductResponseDTO``: output with all product fields.
- ``NameQuery`` / ``PriceRangeQuery`` / ``NameAndPriceQuery``: search
  query-string parameters.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.products.models import Product

CENT = Decimal("0.01")
# Column is DECIMAL(10, 2).
MAX_PRICE_EXCLUSIVE = Decimal("100000000")
# Column is a 32-bit INTEGER on PostgreSQL and MySQL.
MAX_QUANTITY = 2147483647


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _check_length(
    value: Optional[str], minimum: int, maximum: int, message: str
) -> Optional[str]:
    if value is not None and not minimum <= len(value) <= maximum:
        raise ValueError(message)
    return value


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class ProductRequestDTO(_WireModel):
    """Immutable DTO for create / update requests.

    Every field is checked; all violations are reported together.
    """

    required_messages: ClassVar[Dict[str, str]] = {
        "name": "Product name is required",
        "category": "Category is required",
        "sellerName": "Seller name is required",
        "price": "Price is required",
        "quantity": "Quantity is required",
    }

    name: str
    description: Optional[str] = None
    category: str
    subcategory: Optional[str] = None
    seller_name: str
    price: Decimal
    quantity: int

    @field_validator("name", "category", "seller_name", "price", "quantity", mode="before")
    @classmethod
    def required_not_null(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            raise ValueError(cls.required_messages[to_camel(info.field_name)])
        return v

    @field_validator("name")
    @classmethod
    def name_length(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Product name is required")
        return _check_length(
            v, 3, 255, "Product name must be between 3 and 255 characters"
        )

    @field_validator("description")
    @classmethod
    def description_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v, 0, 1000, "Description cannot exceed 1000 characters")

    @field_validator("category")
    @classmethod
    def category_length(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Category is required")
        return _check_length(v, 2, 100, "Category must be between 2 and 100 characters")

    @field_validator("subcategory")
    @classmethod
    def subcategory_length(cls, v: Optional[str]) -> Optional[str]:
        return _check_length(v, 0, 100, "Subcategory cannot exceed 100 characters")

    @field_validator("seller_name")
    @classmethod
    def seller_name_length(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Seller name is required")
        return _check_length(
            v, 2, 255, "Seller name must be between 2 and 255 characters"
        )

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than 0")
        if v >= MAX_PRICE_EXCLUSIVE:
            raise ValueError("Price cannot exceed 99999999.99")
        cents = v.quantize(CENT)
        if cents != v:
            raise ValueError("Price must have at most 2 decimal places")
        return cents

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative")
        if v > MAX_QUANTITY:
            raise ValueError(f"Quantity cannot exceed {MAX_QUANTITY}")
        return v


class NameQuery(_WireModel):
    required_messages: ClassVar[Dict[str, str]] = {
        "name": "Query parameter 'name' is required",
    }

    name: str


class PriceRangeQuery(_WireModel):
    required_messages: ClassVar[Dict[str, str]] = {
        "minPrice": "Query parameter 'minPrice' is required",
        "maxPrice": "Query parameter 'maxPrice' is required",
    }

    min_price: Decimal
    max_price: Decimal


class NameAndPriceQuery(PriceRangeQuery):
    required_messages: ClassVar[Dict[str, str]] = {
        **NameQuery.required_messages,
        **PriceRangeQuery.required_messages,
    }

    name: str


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductResponseDTO(_WireModel):
    """Immutable DTO for product API responses."""

    id: int
    name: str
    description: Optional[str]
    category: str
    subcategory: Optional[str]
    seller_name: str
    price: Decimal
    quantity: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponseDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            category=product.category,
            subcategory=product.subcategory,
            seller_name=product.seller_name,
            price=product.price,
            quantity=product.quantity,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    def to_wire(self) -> Dict[str, object]:
        """camelCase dict ready for DRF's JSON renderer."""
        return self.model_dump(by_alias=True)
