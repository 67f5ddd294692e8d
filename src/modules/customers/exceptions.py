"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
Each one extends a class of the shared taxonomy, which decides the
HTTP status the API reports.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidInput, NotFound


class CustomerAlreadyExists(Conflict):
    """A customer with the same CPF already exists."""

    default_code = "customer_already_exists"


class CustomerNotFound(NotFound):
    """The requested customer does not exist."""

    default_code = "customer_not_found"


class InvalidCustomerData(InvalidInput):
    """Customer input failed validation."""
