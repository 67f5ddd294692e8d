"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
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
from modules.products.models import Product, normalize_code
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_code(self, code: str) -> Optional[Product]:
        """Retrieve a product by code (case-insensitive via upper normalisation)."""
        return Product.objects.filter(code=normalize_code(code)).first()

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"status": "PROMOTIONAL"}
            {"name__icontains": "widget", "is_active": True}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def list_active(self, offset: int, limit: int) -> List[Product]:
        """Return up to ``limit`` active products in creation order."""
        if offset > MAX_SQL_OFFSET:
            return []
        queryset = Product.objects.active().order_by("created_at", "id")
        return list(queryset[offset : offset + limit])

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            code=entity.code,
        )
        return entity

    @transaction.atomic
    def set_active(self, entity: Product, active: bool) -> bool:
        """Write the activation flag; ``False`` when it was already set."""
        changed = entity.activate() if active else entity.deactivate()
        logger.info(
            "product.activation_saved",
            product_id=str(entity.id),
            is_active=entity.is_active,
            changed=changed,
        )
        return changed

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Permanently delete a product by ID.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.hard_deleted", product_id=str(id))
        return True
