"""Customer model keyed by CPF, with soft activation.

Invariants:
- ``cpf`` is the natural key: unique, digits only, never changed after
  creation.
- ``is_active`` is the only lifecycle state (inherited from
  ``ActivatableModel``); removing a customer is a physical delete.
- The CPF never appears unmasked in ``__str__`` or logs.
"""

from __future__ import annotations

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import ActivatableModel
from modules.customers.validators import (
    CPF_LENGTH,
    mask_cpf,
    normalize_cpf,
    validate_cpf,
)


class Customer(ActivatableModel):
    """Customer aggregate root.

    ``cpf`` stores only digits (normalised on save).  ``unique=True`` makes
    the database the final arbiter of uniqueness under concurrent creates.
    """

    cpf = models.CharField(max_length=CPF_LENGTH, unique=True)
    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, blank=True, default="")
    phone = models.CharField(max_length=20, blank=True, default="")
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["is_active", "created_at"],
                name="customers_active_created_idx",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        try:
            self.cpf = validate_cpf(self.cpf or "")
        except ValueError as exc:
            raise ValidationError({"cpf": str(exc)}) from exc

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        if self.cpf:
            self.cpf = normalize_cpf(self.cpf)
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} (CPF: {mask_cpf(self.cpf)})"
