"""Domain error taxonomy shared by every module.

Services raise these; the API layer never builds error responses by hand.
``modules.core.exception_handler`` maps each class to its HTTP status via
``status_code`` / ``default_code``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class FieldViolation:
    """A single violated constraint: which field, and why."""

    field: str
    reason: str


class DomainError(Exception):
    """Base class for errors surfaced to the caller as a distinct outcome."""

    status_code = 500
    default_code = "error"


class NotFound(DomainError):
    """Unknown identifier."""

    status_code = 404
    default_code = "not_found"


class Conflict(DomainError):
    """Uniqueness violation on a natural key."""

    status_code = 409
    default_code = "conflict"


class InvalidInput(DomainError):
    """Missing or malformed field, or a declared constraint failed.

    Carries the structured list of ``FieldViolation`` pairs produced by the
    validation pass.  A plain message may be given instead; it is then
    reported as a single non-field violation.
    """

    status_code = 400
    default_code = "invalid"

    def __init__(self, violations: Iterable[FieldViolation] | str) -> None:
        if isinstance(violations, str):
            violations = [FieldViolation(field="non_field_errors", reason=violations)]
        self.violations: list[FieldViolation] = list(violations)
        summary = "; ".join(f"{v.field}: {v.reason}" for v in self.violations)
        super().__init__(summary or "Invalid input.")
