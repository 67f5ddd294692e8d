"""Pagination helpers.

- ``StandardResultsSetPagination``: DRF envelope pagination for the
  filtered list endpoints (``?page=1&page_size=20``).
- ``page_window`` / ``query_int``: zero-based ``page`` / ``size`` bounds
  used by the active-listing use cases, which return plain sequences.
"""

from __future__ import annotations

from typing import Mapping

from rest_framework.pagination import PageNumberPagination

from modules.core.exceptions import FieldViolation, InvalidInput

DEFAULT_PAGE = 0
DEFAULT_SIZE = 10
MAX_PAGE_SIZE = 100
# Largest OFFSET a 64-bit SQL integer can carry.
MAX_SQL_OFFSET = 2**63 - 1 - MAX_PAGE_SIZE


class StandardResultsSetPagination(PageNumberPagination):
    page_size_query_param = "page_size"
    max_page_size = MAX_PAGE_SIZE


def page_window(
    page: int, size: int, error_class: type[InvalidInput] = InvalidInput
) -> tuple[int, int]:
    """Translate a zero-based page into an ``(offset, limit)`` pair.

    ``size`` is clamped to ``MAX_PAGE_SIZE``.  A page beyond the data is
    not an error here; the query simply yields nothing.  Offsets above
    ``MAX_SQL_OFFSET`` are returned as-is; repositories answer them with an
    empty window without querying.

    Raises:
        error_class: if ``page`` is negative or ``size`` is not positive.
    """
    violations = []
    if page < 0:
        violations.append(FieldViolation("page", "Page must be zero or greater."))
    if size < 1:
        violations.append(FieldViolation("size", "Size must be greater than zero."))
    if violations:
        raise error_class(violations)
    limit = min(size, MAX_PAGE_SIZE)
    return page * limit, limit


def query_int(
    params: Mapping[str, str],
    name: str,
    default: int,
    error_class: type[InvalidInput] = InvalidInput,
) -> int:
    """Read an integer query parameter, falling back to ``default``."""
    raw = params.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise error_class([FieldViolation(name, "A valid integer is required.")]) from exc
