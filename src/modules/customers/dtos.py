"""Customer DTOs for the Service Layer.

Data transfer objects using Pydantic v2.  These are the contracts between
the API layer (ViewSets) and the Service layer.  DTOs are immutable
(``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: input for partial updates (descriptive fields only).
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from modules.customers.validators import validate_cpf

_EMAIL = TypeAdapter(EmailStr)


def _strip(v: object) -> object:
    return v.strip() if isinstance(v, str) else v


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``cpf`` is well-formed and normalised to its 11 digits.
    - ``name`` is present, non-blank and at most 255 characters.
    - ``email``, when given, is a well-formed address.
    """

    model_config = ConfigDict(frozen=True)

    cpf: str
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str = Field(default="", max_length=20)
    address: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return _strip(v)

    @field_validator("cpf")
    @classmethod
    def check_cpf(cls, v: str) -> str:
        return validate_cpf(v)


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied fields will be updated.  An empty
    ``email`` clears the stored address.
    ``cpf`` and ``is_active`` are deliberately absent: the natural key is
    immutable and activation has its own use cases.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = None
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return _strip(v)

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str | None) -> str | None:
        if not v:
            return v
        try:
            return _EMAIL.validate_python(v)
        except ValidationError as exc:
            raise ValueError("value is not a valid email address.") from exc

    def changes(self) -> dict[str, str]:
        """Return the supplied (non-null) fields."""
        return self.model_dump(exclude_none=True)
