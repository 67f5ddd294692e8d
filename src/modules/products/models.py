"""Product model with code uniqueness, price and status constraints.

Rules implemented:
- ``code`` is unique, required, at most 20 characters (normalised upper-case).
- ``name`` is required, at most 200 characters.
- ``price`` is required and never negative.
- ``status`` is one of the closed ``ProductStatus`` set.
- ``is_active`` (inherited) is the activation flag, separate from ``status``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import assert_never

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import ActivatableModel

CODE_MAX_LENGTH = 20
NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


class ProductStatus(models.TextChoices):
    ACTIVE = "ACTIVE", "Active"
    INACTIVE = "INACTIVE", "Inactive"
    DISCONTINUED = "DISCONTINUED", "Discontinued"
    PROMOTIONAL = "PROMOTIONAL", "Promotional"


def normalize_code(value: str) -> str:
    return value.strip().upper()


class Product(ActivatableModel):
    """Product aggregate root.

    ``code`` is normalised to uppercase on save to prevent visual duplicates
    (e.g. "prd-01" vs "PRD-01").
    """

    code = models.CharField(max_length=CODE_MAX_LENGTH, unique=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.CharField(
        max_length=DESCRIPTION_MAX_LENGTH, blank=True, default=""
    )
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[
            MinValueValidator(Decimal("0.00"), message="Price cannot be negative.")
        ],
    )
    stock = models.PositiveIntegerField(default=0)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices,
        default=ProductStatus.ACTIVE,
    )

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["status"], name="products_status_idx"),
            models.Index(
                fields=["is_active", "created_at"],
                name="products_active_created_idx",
            ),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    @property
    def is_available_for_sale(self) -> bool:
        """Whether the product can be offered to customers right now."""
        status = ProductStatus(self.status)
        match status:
            case ProductStatus.ACTIVE | ProductStatus.PROMOTIONAL:
                return self.is_active and self.stock > 0
            case ProductStatus.INACTIVE | ProductStatus.DISCONTINUED:
                return False
            case _:
                assert_never(status)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.code:
            self.code = normalize_code(self.code)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.code:
            self.code = normalize_code(self.code)
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"
