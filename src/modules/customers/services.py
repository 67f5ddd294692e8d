"""Customer service layer (Use Cases).

Orchestrates the Customer lifecycle, delegating persistence to the
injected ``ICustomerRepository``.

Rules enforced here:
- CPF is unique and immutable; duplicates raise ``CustomerAlreadyExists``.
- New customers start active.
- Updates touch descriptive fields only (never id, CPF or ``is_active``).
- Deactivation is a reversible state change; deletion is permanent.
- Activation transitions are idempotent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.exceptions import FieldViolation
from modules.core.pagination import page_window
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerData,
)
from modules.customers.models import Customer
from modules.customers.validators import mask_cpf, validate_cpf

if TYPE_CHECKING:
    from django.db import models

    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new, active customer.

        Raises:
            CustomerAlreadyExists: if the CPF is already registered.
        """
        log = logger.bind(cpf=mask_cpf(dto.cpf))

        if self._repo.get_by_cpf(dto.cpf):
            log.warning("customer.duplicate_cpf")
            raise CustomerAlreadyExists("CPF already registered.")

        customer = Customer(
            cpf=dto.cpf,
            name=dto.name,
            email=dto.email or "",
            phone=dto.phone,
            address=dto.address,
            is_active=True,
        )
        try:
            customer = self._repo.save(customer)
        except IntegrityError as exc:
            # Lost a race against a concurrent create with the same CPF.
            log.warning("customer.duplicate_cpf", source="constraint")
            raise CustomerAlreadyExists("CPF already registered.") from exc

        log.info("customer.created", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def update_customer(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Apply the supplied descriptive fields to an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_or_raise(id)

        changes = dto.changes()
        for field, value in changes.items():
            setattr(customer, field, value)

        customer = self._repo.save(customer)
        logger.info(
            "customer.updated",
            customer_id=str(customer.id),
            fields=sorted(changes),
        )
        return customer

    @transaction.atomic
    def delete_customer(self, id: str) -> None:
        """Permanently remove a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        self._get_or_raise(id)
        self._repo.delete(id)
        logger.info("customer.deleted", customer_id=str(id))

    @transaction.atomic
    def activate_customer(self, id: str) -> Customer:
        """Mark a customer active (no-op when already active).

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        return self._set_active(id, True)

    @transaction.atomic
    def deactivate_customer(self, id: str) -> Customer:
        """Mark a customer inactive (no-op when already inactive).

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        return self._set_active(id, False)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._get_or_raise(id)
        logger.info("customer.retrieved", customer_id=str(id))
        return customer

    def get_customer_by_cpf(self, cpf: str) -> Customer:
        """Retrieve a single customer by its natural key.

        Raises:
            InvalidCustomerData: if ``cpf`` is malformed.
            CustomerNotFound: if no customer has this CPF.
        """
        try:
            normalized = validate_cpf(cpf)
        except ValueError as exc:
            raise InvalidCustomerData([FieldViolation("cpf", str(exc))]) from exc

        customer = self._repo.get_by_cpf(normalized)
        if not customer:
            raise CustomerNotFound(f"Customer with CPF {mask_cpf(normalized)} not found.")
        return customer

    def list_active_customers(self, page: int, size: int) -> List[Customer]:
        """Return one zero-based page of active customers.

        A page past the end yields an empty list.

        Raises:
            InvalidCustomerData: if ``page`` < 0 or ``size`` < 1.
        """
        offset, limit = page_window(page, size, error_class=InvalidCustomerData)
        return self._repo.list_active(offset=offset, limit=limit)

    def list_customers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Customer]:
        """Return customers, optionally filtered."""
        return self._repo.list(filters)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Customer:
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer

    def _set_active(self, id: str, active: bool) -> Customer:
        customer = self._get_or_raise(id)
        changed = self._repo.set_active(customer, active)
        logger.info(
            "customer.activated" if active else "customer.deactivated",
            customer_id=str(customer.id),
            changed=changed,
        )
        return customer
