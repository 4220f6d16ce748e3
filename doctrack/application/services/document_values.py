"""Document value helpers: normalization, display formatting, identity type detection."""

import re
from collections.abc import Iterable

from doctrack.application.dtos.document_type import DocumentTypeResult

DEFAULT_IDENTITY_TYPE_NAMES: tuple[str, ...] = (
    "cpf",
    "cadastro de pessoa fisica",
    "cadastro de pessoa física",
)

_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]")
_CPF_DIGITS = re.compile(r"^(\d{3})(\d{3})(\d{3})(\d{2})$")
_RG_DIGITS = re.compile(r"^(\d{2})(\d{3})(\d{3})([\dXx])$")
_ONLY_DIGITS = re.compile(r"^\d+$")


def clean_document_value(value: str | None) -> str:
    """Strip everything but ASCII letters and digits ("123.456.789-01" -> "12345678901")."""
    if not value:
        return ""
    return _NON_ALPHANUMERIC.sub("", value)


def format_document_for_display(value: str | None) -> str:
    """Render a stored value with punctuation.

    11 digits render as NNN.NNN.NNN-NN (CPF), 8 digits plus a check
    character as NN.NNN.NNN-X (RG). Anything else is returned unchanged.
    """
    if not value:
        return ""
    cleaned = clean_document_value(value)
    if match := _CPF_DIGITS.match(cleaned):
        return "{}.{}.{}-{}".format(*match.groups())
    if match := _RG_DIGITS.match(cleaned):
        return "{}.{}.{}-{}".format(*match.groups()).upper()
    return value


def cpf_search_pattern(query: str) -> str | None:
    """Regex matching a formatted CPF when query is exactly 11 digits, else None."""
    digits = query.strip()
    if len(digits) != 11 or not _ONLY_DIGITS.match(digits):
        return None
    return "^{}\\.{}\\.{}-{}$".format(digits[:3], digits[3:6], digits[6:9], digits[9:])


def is_identity_type(
    document_type: DocumentTypeResult,
    identity_names: Iterable[str] = DEFAULT_IDENTITY_TYPE_NAMES,
) -> bool:
    """True when the type stands for the employee's own identity document.

    The explicit is_identity flag wins; otherwise the lowercased name is
    checked for any of identity_names.
    """
    if document_type.is_identity:
        return True
    lowered = (document_type.name or "").lower()
    return any(name in lowered for name in identity_names)
