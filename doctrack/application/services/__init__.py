"""Application services: validation, pagination and document value helpers."""

from doctrack.application.services.document_values import (
    DEFAULT_IDENTITY_TYPE_NAMES,
    clean_document_value,
    cpf_search_pattern,
    format_document_for_display,
    is_identity_type,
)
from doctrack.application.services.pagination import (
    build_pagination,
    clamp_limit,
    empty_page,
    paginate,
    skip_for,
    total_pages,
    validate_page,
    validate_page_params,
)
from doctrack.application.services.validation import (
    normalize_document_type_name,
    parse_status_filter,
    validate_employee_document,
    validate_employee_name,
    validate_object_id,
    validate_object_ids,
)

__all__ = [
    "DEFAULT_IDENTITY_TYPE_NAMES",
    "build_pagination",
    "clamp_limit",
    "clean_document_value",
    "cpf_search_pattern",
    "empty_page",
    "format_document_for_display",
    "is_identity_type",
    "normalize_document_type_name",
    "paginate",
    "parse_status_filter",
    "skip_for",
    "total_pages",
    "validate_employee_document",
    "validate_employee_name",
    "validate_object_id",
    "validate_object_ids",
    "validate_page",
    "validate_page_params",
]
