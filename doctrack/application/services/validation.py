"""Input validation for ids, employee fields, document type names and filters.

Used by use cases before touching repositories. Raises domain exceptions.
"""

import re

from doctrack.domain.enums import ActiveStatusFilter
from doctrack.domain.exceptions import InvalidIdFormatException, ValidationException
from doctrack.shared.utils.generators import is_object_id

EMPLOYEE_NAME_MIN_LENGTH = 3
EMPLOYEE_NAME_MAX_LENGTH = 100
EMPLOYEE_DOCUMENT_PATTERN = re.compile(r"^\d{3}\.\d{3}\.\d{3}-\d{2}$")
DOCUMENT_TYPE_NAME_MAX_LENGTH = 100


def validate_object_id(value: str | None, field: str = "id") -> str:
    """Return value if it is a 24-character hex id; raise InvalidIdFormatException otherwise."""
    if not is_object_id(value):
        raise InvalidIdFormatException(value, field)
    return str(value)


def validate_object_ids(values: list[str], field: str = "id") -> list[str]:
    """Validate every id and return them de-duplicated, first occurrence order kept."""
    seen: dict[str, None] = {}
    for value in values:
        seen[validate_object_id(value, field)] = None
    return list(seen)


def validate_employee_name(name: str | None) -> str:
    """Return the trimmed name; 3 to 100 characters."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationException("Employee name is required", field="name")
    if not EMPLOYEE_NAME_MIN_LENGTH <= len(cleaned) <= EMPLOYEE_NAME_MAX_LENGTH:
        raise ValidationException(
            f"Employee name must be between {EMPLOYEE_NAME_MIN_LENGTH} and "
            f"{EMPLOYEE_NAME_MAX_LENGTH} characters",
            field="name",
        )
    return cleaned


def validate_employee_document(document: str | None) -> str:
    """Return the trimmed document; must match NNN.NNN.NNN-NN."""
    cleaned = (document or "").strip()
    if not cleaned:
        raise ValidationException("Employee document is required", field="document")
    if not EMPLOYEE_DOCUMENT_PATTERN.match(cleaned):
        raise ValidationException(
            "Employee document must be in format XXX.XXX.XXX-XX", field="document"
        )
    return cleaned


def normalize_document_type_name(name: str | None) -> str:
    """Trim and uppercase a document type name (names are stored uppercase)."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationException("Document type name is required", field="name")
    if len(cleaned) > DOCUMENT_TYPE_NAME_MAX_LENGTH:
        raise ValidationException(
            f"Document type name must be at most {DOCUMENT_TYPE_NAME_MAX_LENGTH} characters",
            field="name",
        )
    return cleaned.upper()


def parse_status_filter(
    value: str | ActiveStatusFilter | None,
    default: ActiveStatusFilter = ActiveStatusFilter.ALL,
) -> ActiveStatusFilter:
    """Parse an active/inactive/all filter value; None yields default."""
    if value is None or value == "":
        return default
    if isinstance(value, ActiveStatusFilter):
        return value
    try:
        return ActiveStatusFilter(value.strip().lower())
    except ValueError as e:
        raise ValidationException(
            f"Invalid status filter {value!r}; expected one of "
            f"{', '.join(ActiveStatusFilter.values())}",
            field="status",
        ) from e
