"""Product DTOs for the Service Layer.

Data transfer objects using Pydantic v2.  These are the contracts between
the API layer (ViewSets) and the Service layer.  DTOs are immutable
(``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.products.models import (
    CODE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    normalize_code,
)

# ---------------------------------------------------------------------------
# Enum (framework-agnostic, not Django TextChoices)
# ---------------------------------------------------------------------------


class ProductStatusEnum(StrEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DISCONTINUED = "DISCONTINUED"
    PROMOTIONAL = "PROMOTIONAL"


def _strip(v: object) -> object:
    return v.strip() if isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``code`` and ``name`` are non-blank and within their length bounds.
    - ``price`` is present and not negative (two decimal places at most).
    - ``stock`` is not negative.
    - ``status`` is present and one of ``ProductStatusEnum``.
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1, max_length=CODE_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    status: ProductStatusEnum
    description: str = Field(default="", max_length=DESCRIPTION_MAX_LENGTH)
    stock: int = Field(default=0, ge=0)

    @field_validator("code", mode="before")
    @classmethod
    def normalise_code(cls, v: object) -> object:
        return normalize_code(v) if isinstance(v, str) else v

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return _strip(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional; only supplied fields will be updated.
    ``code`` (natural key) and ``is_active`` cannot be changed here.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    stock: int | None = Field(default=None, ge=0)
    status: ProductStatusEnum | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return _strip(v)

    def changes(self) -> dict[str, object]:
        """Return the supplied (non-null) fields."""
        return self.model_dump(exclude_none=True)
