"""Explicit validation pass executed before a use case runs.

Request payloads are parsed into immutable Pydantic DTOs.  A failed parse is
converted into ``FieldViolation`` pairs and raised as the module's
``InvalidInput`` subclass, so callers receive a structured error rather
than a Pydantic exception.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import FieldViolation, InvalidInput

DTO = TypeVar("DTO", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "


def violations_from_pydantic(exc: PydanticValidationError) -> list[FieldViolation]:
    """Flatten a Pydantic error into ``(field, reason)`` pairs."""
    violations = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        reason = error["msg"]
        if reason.startswith(_VALUE_ERROR_PREFIX):
            reason = reason[len(_VALUE_ERROR_PREFIX):]
        violations.append(FieldViolation(field=field, reason=reason))
    return violations


def build_dto(
    dto_class: type[DTO],
    data: Mapping[str, Any],
    error_class: type[InvalidInput] = InvalidInput,
) -> DTO:
    """Build ``dto_class`` from the declared fields present in ``data``.

    Unknown keys are dropped; ``data`` may be a plain dict or a Django
    ``QueryDict`` (``.get`` returns the last value for a key).

    Raises:
        error_class: listing every violated field.
    """
    if not isinstance(data, Mapping):
        raise error_class("Expected a JSON object.")
    payload = {
        name: data.get(name) for name in dto_class.model_fields if name in data
    }
    try:
        return dto_class.model_validate(payload)
    except PydanticValidationError as exc:
        raise error_class(violations_from_pydantic(exc)) from exc
