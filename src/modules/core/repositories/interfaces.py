"""Generic repository interfaces (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend, and
``IActivatableRepository[T]`` for aggregates with an activation flag.
Service-layer code depends on these abstractions, never on Django ORM
directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Protocol, TypeVar

from django.db import models

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Queryable(Protocol[T_co]):
    def filter(self, **kwargs: Any) -> models.QuerySet: ...


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``, ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> Queryable[T]:
        """List entities with optional filters."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Permanently remove an entity by ID."""


class IActivatableRepository(IRepository[T]):
    """Repository contract for aggregates with an ``is_active`` flag."""

    @abstractmethod
    def list_active(self, offset: int, limit: int) -> List[T]:
        """Return a window of active entities in creation order."""

    @abstractmethod
    def set_active(self, entity: T, active: bool) -> bool:
        """Persist the activation flag; return ``True`` if it changed."""
