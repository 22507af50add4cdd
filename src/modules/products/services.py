"""Product service layer (Use Cases).

Single seam between the HTTP views and storage.  Converts request DTOs
into ``Product`` entities and entities back into response DTOs,
applies not-found semantics, and delegates every query to the injected
``IProductRepository``.

Each write runs in its own ``transaction.atomic`` block; reads run
outside an explicit transaction.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List

import structlog
from django.db import transaction

from modules.products.dtos import ProductResponseDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductRequestDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = (
    "name",
    "description",
    "category",
    "subcategory",
    "seller_name",
    "price",
    "quantity",
)


def _to_responses(products: Iterable[Product]) -> List[ProductResponseDTO]:
    return [ProductResponseDTO.from_entity(product) for product in products]


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.find_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: ProductRequestDTO) -> ProductResponseDTO:
        """Persist a new product built from ``dto``.

        ID and timestamps are left unset and assigned by the store.
        """
        product = Product(**{field: getattr(dto, field) for field in MUTABLE_FIELDS})
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return ProductResponseDTO.from_entity(product)

    @transaction.atomic
    def update(self, id: int, dto: ProductRequestDTO) -> ProductResponseDTO:
        """Replace every mutable field of an existing product.

        Raises:
            ProductNotFound: if no product has that ID.
        """
        product = self._get_or_raise(id)
        for field in MUTABLE_FIELDS:
            setattr(product, field, getattr(dto, field))
        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return ProductResponseDTO.from_entity(product)

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Hard-delete a product.

        Raises:
            ProductNotFound: if no product has that ID.
        """
        if not self._repo.exists_by_id(id):
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(id)
        self._repo.delete_by_id(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all(self) -> List[ProductResponseDTO]:
        return _to_responses(self._repo.find_all())

    def get_by_id(self, id: int) -> ProductResponseDTO:
        """Raises ``ProductNotFound`` when no product has that ID."""
        return ProductResponseDTO.from_entity(self._get_or_raise(id))

    def search_by_name(self, fragment: str) -> List[ProductResponseDTO]:
        return _to_responses(self._repo.find_by_name_containing_ignore_case(fragment))

    def find_by_category(self, category: str) -> List[ProductResponseDTO]:
        return _to_responses(self._repo.find_by_category(category))

    def find_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> List[ProductResponseDTO]:
        return _to_responses(self._repo.find_by_price_between(min_price, max_price))

    def search_by_name_and_price(
        self, fragment: str, min_price: Decimal, max_price: Decimal
    ) -> List[ProductResponseDTO]:
        return _to_responses(
            self._repo.find_by_name_and_price_range(fragment, min_price, max_price)
        )

    def get_in_stock(self) -> List[ProductResponseDTO]:
        return _to_responses(self._repo.find_in_stock())

    def find_by_seller(self, seller_name: str) -> List[ProductResponseDTO]:
        return _to_responses(self._repo.find_by_seller_name(seller_name))
