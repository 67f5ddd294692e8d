"""Product service layer (Use Cases).

Orchestrates the Product lifecycle, delegating persistence to the
injected ``IProductRepository``.

Rules enforced here:
- ``code`` is unique and immutable; duplicates raise ``ProductAlreadyExists``.
- Price / stock / length bounds are checked by the DTOs before any write.
- Deactivation is a reversible state change; deletion is permanent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.pagination import page_window
from modules.products.exceptions import (
    InvalidProductData,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from django.db import models

    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new, active product.

        Raises:
            ProductAlreadyExists: if the code is already taken.
        """
        log = logger.bind(code=dto.code)

        if self._repo.get_by_code(dto.code):
            log.warning("product.duplicate_code")
            raise ProductAlreadyExists(f"Code '{dto.code}' already registered.")

        product = Product(
            code=dto.code,
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
            status=dto.status,
            is_active=True,
        )
        try:
            product = self._repo.save(product)
        except IntegrityError as exc:
            log.warning("product.duplicate_code", source="constraint")
            raise ProductAlreadyExists(
                f"Code '{dto.code}' already registered."
            ) from exc

        log.info("product.created", product_id=str(product.id))
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        logger.info(
            "product.updated", product_id=str(product.id), fields=sorted(changes)
        )
        return product

    @transaction.atomic
    def delete_product(self, id: str) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self._get_or_raise(id)
        self._repo.delete(id)
        logger.info("product.deleted", product_id=str(id))

    @transaction.atomic
    def activate_product(self, id: str) -> Product:
        return self._set_active(id, True)

    @transaction.atomic
    def deactivate_product(self, id: str) -> Product:
        return self._set_active(id, False)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=str(id))
        return product

    def get_product_by_code(self, code: str) -> Product:
        """Retrieve a single product by code.

        Raises:
            InvalidProductData: if ``code`` is blank.
            ProductNotFound: if no product has this code.
        """
        if not code or not code.strip():
            raise InvalidProductData("Product code must not be blank.")
        product = self._repo.get_by_code(code)
        if not product:
            raise ProductNotFound(f"Product with code '{code}' not found.")
        return product

    def list_active_products(self, page: int, size: int) -> List[Product]:
        """Return one zero-based page of active products.

        Raises:
            InvalidProductData: if ``page`` < 0 or ``size`` < 1.
        """
        offset, limit = page_window(page, size, error_class=InvalidProductData)
        return self._repo.list_active(offset=offset, limit=limit)

    def list_products(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Product]:
        """Return products, optionally filtered."""
        return self._repo.list(filters)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    def _set_active(self, id: str, active: bool) -> Product:
        product = self._get_or_raise(id)
        changed = self._repo.set_active(product, active)
        logger.info(
            "product.activated" if active else "product.deactivated",
            product_id=str(product.id),
            changed=changed,
        )
        return product
