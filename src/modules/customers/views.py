"""Customer API views.

Exposes the ``CustomerService`` via HTTP using DRF ViewSets.
Domain exceptions propagate to ``standardized_exception_handler``, which
maps them to 400 / 404 / 409; the view never swallows exceptions.
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
from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import InvalidCustomerData
from modules.customers.filters import CustomerFilter
from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


class CustomerViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for the Customer lifecycle.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``; all ORM access goes through
    the service/repository layer.
    """

    filterset_class = CustomerFilter
    search_fields = ["name", "email", "cpf"]
    ordering_fields = ["created_at", "id", "name", "email"]
    ordering = ["created_at", "id"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    pagination_class = StandardResultsSetPagination
    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_customers()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        customer = self._service.get_customer(pk)
        return Response(CustomerSerializer(customer).data)

    @action(detail=False, methods=["get"], url_path=r"cpf/(?P<cpf>[^/]+)")
    def by_cpf(self, request: Request, cpf: str | None = None) -> Response:
        """GET /api/v1/customers/cpf/{cpf}/"""
        customer = self._service.get_customer_by_cpf(cpf or "")
        return Response(CustomerSerializer(customer).data)

    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request: Request) -> Response:
        """GET /api/v1/customers/active/?page=0&size=10

        ``page`` is zero-based.  Returns a plain JSON array; a page past the
        end is an empty array.
        """
        params = request.query_params
        page = query_int(params, "page", DEFAULT_PAGE, InvalidCustomerData)
        size = query_int(params, "size", DEFAULT_SIZE, InvalidCustomerData)
        customers = self._service.list_active_customers(page, size)
        return Response(CustomerSerializer(customers, many=True).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        dto = build_dto(CreateCustomerDTO, request.data, InvalidCustomerData)
        customer = self._service.create_customer(dto)
        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT/PATCH /api/v1/customers/{pk}/

        Only supplied descriptive fields change; ``cpf`` and ``is_active``
        in the body are ignored.
        """
        dto = build_dto(UpdateCustomerDTO, request.data, InvalidCustomerData)
        customer = self._service.update_customer(pk, dto)
        return Response(CustomerSerializer(customer).data)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/ (permanent removal)."""
        self._service.delete_customer(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------

    @action(detail=True, methods=["post"])
    def activate(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/customers/{pk}/activate/"""
        customer = self._service.activate_customer(pk)
        return Response(CustomerSerializer(customer).data)

    @action(detail=True, methods=["post"])
    def deactivate(self, request: Request, pk: str | None = None) -> Response:
        """POST /api/v1/customers/{pk}/deactivate/"""
        customer = self._service.deactivate_customer(pk)
        return Response(CustomerSerializer(customer).data)
