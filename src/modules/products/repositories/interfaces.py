"""Product repository interface.

Extends ``IActivatableRepository[Product]`` with the natural-key look-up
required by the unique-code rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IActivatableRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IActivatableRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List products with optional filters."""

    @abstractmethod
    def get_by_code(self, code: str) -> Optional[Product]:
        """Retrieve a product by code."""
