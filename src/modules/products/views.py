"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions propagate to ``standardized_exception_handler``.
"""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.pagination import (
    DEFAULT_PAGE,
    DEFAULT_SIZE,
    StandardResultsSetPagination,
    query_int,
)
from modules.core.validation import build_dto
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import InvalidProductData
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for the Product lifecycle.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    """

    filterset_class = ProductFilter
    search_fields = ["name", "code", "description"]
    ordering_fields = ["created_at", "id", "name", "price", "stock"]
    ordering = ["created_at", "id"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    pagination_class = StandardResultsSetPagination
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_products()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(pk)
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"], url_path=r"code/(?P<code>[^/]+)")
    def by_code(self, request: Request, code: str | None = None) -> Response:
        """GET /api/v1/products/code/{code}/"""
        product = self._service.get_product_by_code(code or "")
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request: Request) -> Response:
        """GET /api/v1/products/active/?page=0&size=10"""
        params = request.query_params
        page = query_int(params, "page", DEFAULT_PAGE, InvalidProductData)
        size = query_int(params, "size", DEFAULT_SIZE, InvalidProductData)
        products = self._service.list_active_products(page, size)
        return Response(ProductSerializer(products, many=True).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = build_dto(CreateProductDTO, request.data, InvalidProductData)
        product = self._service.create_product(dto)
        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/"""
        dto = build_dto(UpdateProductDTO, request.data, InvalidProductData)
        product = self._service.update_product(pk, dto)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete_product(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"])
    def activate(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/products/{pk}/activate/"""
        product = self._service.activate_product(pk)
        return Response(ProductSerializer(product).data)

    @action(detail=True, methods=["post"])
    def deactivate(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/products/{pk}/deactivate/"""
        product = self._service.deactivate_product(pk)
        return Response(ProductSerializer(product).data)
