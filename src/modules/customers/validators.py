"""CPF (Cadastro de Pessoas Físicas) normalisation and validation.

Accepted input: 11 digits, optionally punctuated with ``.``, ``-`` or
ASCII whitespace (``123.456.789-01``).  Any other character, non-ASCII
digits included, makes the value malformed.  Check-digit verification
via *validate-docbr* is enabled with the ``CPF_STRICT_VALIDATION`` setting.
"""

from __future__ import annotations

import re

from django.conf import settings
from validate_docbr import CPF

CPF_LENGTH = 11

_SEPARATORS = re.compile(r"[ \t\n\r\f\v.\-]")
_DIGITS = re.compile(rf"[0-9]{{{CPF_LENGTH}}}")


def normalize_cpf(value: str) -> str:
    """Strip separator characters, leaving anything else untouched."""
    return _SEPARATORS.sub("", value)


def validate_cpf(value: str, *, strict: bool | None = None) -> str:
    """Return the normalised CPF or raise ``ValueError``.

    ``strict`` defaults to ``settings.CPF_STRICT_VALIDATION``.
    """
    if not isinstance(value, str):
        raise ValueError("CPF must be a string.")
    digits = normalize_cpf(value)
    if not _DIGITS.fullmatch(digits):
        raise ValueError(f"CPF must contain exactly {CPF_LENGTH} digits.")
    if strict is None:
        strict = getattr(settings, "CPF_STRICT_VALIDATION", False)
    if strict and not CPF().validate(digits):
        raise ValueError("Invalid CPF check digits.")
    return digits


def mask_cpf(value: str) -> str:
    """Mask a CPF, showing only the last 2 digits."""
    suffix = value[-2:] if value else "??"
    return f"***{suffix}"
