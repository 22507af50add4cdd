"""Unit tests for the Product model.

Covers:
- Timestamp bookkeeping inherited from TimestampedModel.
- Price > 0 and quantity >= 0 (application validators + DB constraints).
- Default ordering and __str__ representation.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from freezegun import freeze_time

from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build(**overrides) -> Product:
    defaults = {
        "name": "Test Product",
        "category": "Electronics",
        "seller_name": "Tech Store Inc.",
        "price": Decimal("29.90"),
        "quantity": 100,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


class TestTimestamps:
    def test_created_and_updated_equal_on_insert(self):
        product = _build()
        product.save()
        assert product.id is not None
        assert product.created_at is not None
        assert product.created_at == product.updated_at

    def test_update_refreshes_updated_at_only(self):
        with freeze_time("2026-01-01 10:00:00"):
            product = _build()
            product.save()
        created = product.created_at

        with freeze_time("2026-01-01 10:05:00"):
            product.name = "Renamed"
            product.save()

        product.refresh_from_db()
        assert product.created_at == created
        assert product.updated_at - product.created_at == timedelta(minutes=5)

    def test_update_fields_always_includes_updated_at(self):
        with freeze_time("2026-01-01 10:00:00"):
            product = _build()
            product.save()

        with freeze_time("2026-01-02 10:00:00"):
            product.quantity = 1
            product.save(update_fields=["quantity"])

        product.refresh_from_db()
        assert product.quantity == 1
        assert product.updated_at.day == 2


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidation:
    def test_valid_product_passes_full_clean(self):
        _build(description=None, subcategory=None).full_clean(
            exclude=["created_at", "updated_at"]
        )

    def test_zero_price_fails_full_clean(self):
        with pytest.raises(ValidationError) as exc_info:
            _build(price=Decimal("0.00")).full_clean(
                exclude=["created_at", "updated_at"]
            )
        assert "price" in exc_info.value.message_dict

    def test_short_name_fails_full_clean(self):
        with pytest.raises(ValidationError) as exc_info:
            _build(name="ab").full_clean(exclude=["created_at", "updated_at"])
        assert "name" in exc_info.value.message_dict

    def test_db_rejects_non_positive_price(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _build(price=Decimal("-1.00")).save()

    def test_db_rejects_negative_quantity(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            _build(quantity=-1).save()


# ---------------------------------------------------------------------------
# Ordering / display
# ---------------------------------------------------------------------------


class TestOrderingAndDisplay:
    def test_default_ordering_is_insertion_order(self):
        for name in ("Zeta", "Alpha", "Mid"):
            _build(name=name).save()
        assert [p.name for p in Product.objects.all()] == ["Zeta", "Alpha", "Mid"]

    def test_str(self):
        assert str(_build(name="Laptop")) == "Laptop (Electronics)"
