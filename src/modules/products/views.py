"""Product API views.

Exposes ``ProductService`` over HTTP with a DRF ``ViewSet``.  Views only
parse input into DTOs, call the service, and pick the status code.
Domain and validation exceptions propagate to the handler in
``modules.core.exceptions``, which renders the error envelope.
"""

from __future__ import annotations

import structlog
from drf_spectacular.utils import (
    OpenApiExample,
    OpenApiParameter,
    extend_schema,
    extend_schema_view,
)
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.validation import validate
from modules.products.dtos import (
    NameAndPriceQuery,
    NameQuery,
    PriceRangeQuery,
    ProductRequestDTO,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ErrorResponseSerializer,
    ProductRequestSerializer,
    ProductResponseSerializer,
)
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

_NAME = OpenApiParameter("name", str, required=True, description="Name fragment")
_MIN_PRICE = OpenApiParameter(
    "minPrice", float, required=True, examples=[OpenApiExample("min", value=100.00)]
)
_MAX_PRICE = OpenApiParameter(
    "maxPrice", float, required=True, examples=[OpenApiExample("max", value=1000.00)]
)

_LIST = {200: ProductResponseSerializer(many=True)}
_LIST_OR_400 = {**_LIST, 400: ErrorResponseSerializer}


def _many(products) -> Response:
    return Response([product.to_wire() for product in products])


@extend_schema_view(
    list=extend_schema(summary="Get all products", responses=_LIST),
    retrieve=extend_schema(
        summary="Get product by ID",
        responses={200: ProductResponseSerializer, 404: ErrorResponseSerializer},
    ),
    create=extend_schema(
        summary="Create new product",
        request=ProductRequestSerializer,
        responses={201: ProductResponseSerializer, 400: ErrorResponseSerializer},
    ),
    update=extend_schema(
        summary="Update product",
        request=ProductRequestSerializer,
        responses={
            200: ProductResponseSerializer,
            400: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    ),
    destroy=extend_schema(
        summary="Delete product",
        responses={204: None, 404: ErrorResponseSerializer},
    ),
)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD and search operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    lookup_value_regex = "[0-9]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        return _many(self._service.get_all())

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}"""
        return Response(self._service.get_by_id(int(pk)).to_wire())

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = validate(ProductRequestDTO, request.data)
        logger.info("product.create_requested", name=dto.name)
        product = self._service.create(dto)
        return Response(product.to_wire(), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}"""
        dto = validate(ProductRequestDTO, request.data)
        return Response(self._service.update(int(pk), dto).to_wire())

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        self._service.delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Search / filters
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Search products by name (case-insensitive substring)",
        parameters=[_NAME],
        responses=_LIST_OR_400,
    )
    @action(detail=False, methods=["get"], url_path="search/name")
    def search_by_name(self, request: Request) -> Response:
        """GET /api/products/search/name?name="""
        query = validate(NameQuery, request.query_params.dict())
        return _many(self._service.search_by_name(query.name))

    @extend_schema(summary="Find products by category", responses=_LIST)
    @action(detail=False, methods=["get"], url_path="category/(?P<category>[^/]+)")
    def by_category(self, request: Request, category: str) -> Response:
        """GET /api/products/category/{category}"""
        return _many(self._service.find_by_category(category))

    @extend_schema(
        summary="Find products by price range (inclusive)",
        parameters=[_MIN_PRICE, _MAX_PRICE],
        responses=_LIST_OR_400,
    )
    @action(detail=False, methods=["get"], url_path="price-range")
    def price_range(self, request: Request) -> Response:
        """GET /api/products/price-range?minPrice=&maxPrice="""
        query = validate(PriceRangeQuery, request.query_params.dict())
        return _many(self._service.find_by_price_range(query.min_price, query.max_price))

    @extend_schema(
        summary="Search products by name and price range",
        parameters=[_NAME, _MIN_PRICE, _MAX_PRICE],
        responses=_LIST_OR_400,
    )
    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request: Request) -> Response:
        """GET /api/products/search?name=&minPrice=&maxPrice="""
        query = validate(NameAndPriceQuery, request.query_params.dict())
        return _many(
            self._service.search_by_name_and_price(
                query.name, query.min_price, query.max_price
            )
        )

    @extend_schema(summary="Get in-stock products", responses=_LIST)
    @action(detail=False, methods=["get"], url_path="in-stock")
    def in_stock(self, request: Request) -> Response:
        """GET /api/products/in-stock"""
        return _many(self._service.get_in_stock())

    @extend_schema(summary="Find products by seller", responses=_LIST)
    @action(detail=False, methods=["get"], url_path="seller/(?P<seller_name>[^/]+)")
    def by_seller(self, request: Request, seller_name: str) -> Response:
        """GET /api/products/seller/{sellerName}"""
        return _many(self._service.find_by_seller(seller_name))
