"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
Each one extends a class of the shared taxonomy, which decides the
HTTP status the API reports.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidInput, NotFound


class ProductAlreadyExists(Conflict):
    """A product with the same code already exists."""

    default_code = "product_already_exists"


class ProductNotFound(NotFound):
    """The requested product does not exist."""

    default_code = "product_not_found"


class InvalidProductData(InvalidInput):
    """Product input failed validation."""
