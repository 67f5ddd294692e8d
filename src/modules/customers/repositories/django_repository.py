"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising; the Service Layer decides how to translate a missing
entity into a domain error.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.core.pagination import MAX_SQL_OFFSET
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF (digits only)."""
        return Customer.objects.filter(cpf=cpf).first()

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Customer]:
        """List customers with optional Django ORM look-ups.

        Examples of valid filters::

            {"is_active": True}
            {"name__icontains": "ana", "is_active": True}
        """
        queryset = Customer.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def list_active(self, offset: int, limit: int) -> List[Customer]:
        """Return up to ``limit`` active customers in creation order."""
        if offset > MAX_SQL_OFFSET:
            return []
        queryset = Customer.objects.active().order_by("created_at", "id")
        return list(queryset[offset : offset + limit])

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            "customer.saved",
            customer_id=str(entity.id),
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def set_active(self, entity: Customer, active: bool) -> bool:
        """Write the activation flag; ``False`` when it was already set."""
        changed = entity.activate() if active else entity.deactivate()
        logger.info(
            "customer.activation_saved",
            customer_id=str(entity.id),
            is_active=entity.is_active,
            changed=changed,
        )
        return changed

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Permanently delete a customer by ID.

        Returns ``True`` if the customer was found and removed,
        ``False`` if no customer exists with the given ID.
        """
        customer = self.get_by_id(id)
        if not customer:
            return False
        customer.delete()
        logger.info("customer.hard_deleted", customer_id=str(id))
        return True
