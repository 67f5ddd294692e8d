"""Base abstract models for the registry.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``ActivatableModel``: Extends BaseModel with an ``is_active`` flag and
  explicit ``activate()`` / ``deactivate()`` transitions.

Design decisions:
- Deactivation is a state change on a live row.  ``delete()`` is left as
  Django's physical delete, so the two operations can never be confused.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.active()``
  explicitly to restrict to active rows.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

import uuid6
from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Activation infrastructure
# ---------------------------------------------------------------------------


class ActivatableQuerySet(models.QuerySet):
    """QuerySet with activation helpers."""

    def active(self) -> ActivatableQuerySet:
        """Return only active records."""
        return self.filter(is_active=True)

    def inactive(self) -> ActivatableQuerySet:
        """Return only deactivated records."""
        return self.filter(is_active=False)


class ActivatableManager(models.Manager):
    """Manager that exposes ``.active()`` / ``.inactive()`` on the queryset."""

    def get_queryset(self) -> ActivatableQuerySet:
        return ActivatableQuerySet(self.model, using=self._db)

    def active(self) -> ActivatableQuerySet:
        return self.get_queryset().active()

    def inactive(self) -> ActivatableQuerySet:
        return self.get_queryset().inactive()


class ActivatableModel(BaseModel):
    """Abstract model with a two-state ``is_active`` flag.

    - New records start active.
    - ``activate()`` / ``deactivate()`` only ever write ``is_active`` (and
      ``updated_at``); both are idempotent and return whether the stored
      state actually changed.
    """

    is_active = models.BooleanField(default=True)

    objects = ActivatableManager()

    class Meta:
        abstract = True

    def activate(self) -> bool:
        """Mark this record active. No-op if already active."""
        return self._set_active(True)

    def deactivate(self) -> bool:
        """Mark this record inactive. No-op if already inactive."""
        return self._set_active(False)

    def _set_active(self, value: bool) -> bool:
        if self.is_active == value:
            return False
        self.is_active = value
        self.save(update_fields=["is_active", "updated_at"])
        return True
