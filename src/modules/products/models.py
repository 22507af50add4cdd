"""Product model.

Business rules implemented:
- Price must be greater than zero (validator + database constraint).
- Quantity cannot be negative (database constraint).
- Timestamps are maintained by ``TimestampedModel``.
- Deletion is physical; there is no soft-delete state.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import (
    MaxLengthValidator,
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
)
from django.db import models

from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    """A catalogue entry offered by a seller."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, validators=[MinLengthValidator(3)])
    description = models.TextField(
        null=True,
        blank=True,
        validators=[MaxLengthValidator(1000)],
    )
    category = models.CharField(max_length=100, validators=[MinLengthValidator(2)])
    subcategory = models.CharField(max_length=100, null=True, blank=True)
    seller_name = models.CharField(max_length=255, validators=[MinLengthValidator(2)])
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    quantity = models.IntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(2147483647)]
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="products_quantity_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.category})"
