"""Product repository interface.

Extends ``IRepository[Product]`` with the finder look-ups used by the
search endpoints.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_by_category(self, category: str) -> List[Product]:
        """Products whose category equals ``category`` exactly."""

    @abstractmethod
    def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Products priced within ``[min_price, max_price]`` (inclusive)."""

    @abstractmethod
    def find_by_name_containing_ignore_case(self, fragment: str) -> List[Product]:
        """Products whose name contains ``fragment``, ignoring case."""

    @abstractmethod
    def find_by_name_and_price_range(
        self, fragment: str, min_price: Decimal, max_price: Decimal
    ) -> List[Product]:
        """Conjunction of the name and price-range predicates."""

    @abstractmethod
    def find_in_stock(self) -> List[Product]:
        """Products with ``quantity > 0``."""

    @abstractmethod
    def find_by_seller_name(self, seller_name: str) -> List[Product]:
        """Products whose seller name equals ``seller_name`` exactly."""
