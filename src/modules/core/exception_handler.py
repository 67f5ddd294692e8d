"""DRF exception handler producing one error format for the whole API.

Every error response has the shape::

    {
        "type": "validation_error" | "client_error" | "server_error",
        "errors": [{"code": "...", "detail": "...", "attr": "field" | null}]
    }

Domain errors (``modules.core.exceptions``) are rendered here, so views let
them propagate instead of catching each one.
"""

from __future__ import annotations

from typing import Any, Iterator

import structlog
from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError, InvalidInput

logger = structlog.get_logger(__name__)

NON_FIELD_ERRORS = "non_field_errors"


def standardized_exception_handler(exc: Exception, context: dict) -> Response | None:
    if isinstance(exc, DomainError):
        return _domain_error_response(exc)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.APIException):
        errors = list(_flatten(exc.get_full_details()))
    else:
        errors = [{"code": "error", "detail": str(response.data), "attr": None}]

    response.data = {
        "type": _error_type(exc, response.status_code),
        "errors": errors,
    }
    return response


def _domain_error_response(exc: DomainError) -> Response:
    if isinstance(exc, InvalidInput):
        errors = [
            {
                "code": exc.default_code,
                "detail": violation.reason,
                "attr": None if violation.field == NON_FIELD_ERRORS else violation.field,
            }
            for violation in exc.violations
        ]
    else:
        errors = [{"code": exc.default_code, "detail": str(exc), "attr": None}]

    logger.info(
        "api.domain_error",
        error=exc.__class__.__name__,
        status_code=exc.status_code,
    )
    return Response(
        {"type": _error_type(exc, exc.status_code), "errors": errors},
        status=exc.status_code,
    )


def _error_type(exc: Exception, status_code: int) -> str:
    if isinstance(exc, (exceptions.ValidationError, InvalidInput)):
        return "validation_error"
    if status_code >= 500:
        return "server_error"
    return "client_error"


def _flatten(details: Any, attr: str | None = None) -> Iterator[dict[str, Any]]:
    """Walk DRF's nested ``get_full_details()`` output into flat errors."""
    if isinstance(details, dict) and set(details) == {"message", "code"}:
        yield {
            "code": str(details["code"]),
            "detail": str(details["message"]),
            "attr": None if attr == NON_FIELD_ERRORS else attr,
        }
    elif isinstance(details, dict):
        for key, value in details.items():
            yield from _flatten(value, key if attr is None else f"{attr}.{key}")
    elif isinstance(details, list):
        for item in details:
            yield from _flatten(item, attr)
