"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

import structlog
from django.db import transaction
from django.db.models import QuerySet

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _all() -> QuerySet[Product]:
        return Product.objects.order_by("id")

    def find_all(self) -> List[Product]:
        return list(self._all())

    def find_by_id(self, id: Any) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return self._all().filter(pk=id).first()
        except (TypeError, ValueError):
            return None

    def exists_by_id(self, id: Any) -> bool:
        try:
            return Product.objects.filter(pk=id).exists()
        except (TypeError, ValueError):
            return False

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist a product: INSERT when it has no ID yet, UPDATE otherwise."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete_by_id(self, id: Any) -> None:
        deleted, _ = Product.objects.filter(pk=id).delete()
        logger.info("product.deleted", product_id=id, rows=deleted)

    # ------------------------------------------------------------------
    # Finders
    # ------------------------------------------------------------------

    def find_by_category(self, category: str) -> List[Product]:
        return list(self._all().filter(category=category))

    def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        return list(self._all().filter(price__gte=min_price, price__lte=max_price))

    def find_by_name_containing_ignore_case(self, fragment: str) -> List[Product]:
        return list(self._all().filter(name__icontains=fragment))

    def find_by_name_and_price_range(
        self, fragment: str, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        return list(
            self._all().filter(
                name__icontains=fragment,
                price__gte=min_price,
                price__lte=max_price,
            )
        )

    def find_in_stock(self) -> List[Product]:
        return list(self._all().filter(quantity__gt=0))

    def find_by_seller_name(self, seller_name: str) -> List[Product]:
        return list(self._all().filter(seller_name=seller_name))
