"""Customer repository interface.

Extends ``IActivatableRepository[Customer]`` with the natural-key look-up
required by the CPF uniqueness rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IActivatableRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IActivatableRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Customer]":
        """List customers with optional filters."""

    @abstractmethod
    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by normalised CPF."""
