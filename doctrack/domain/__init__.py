"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus
from doctrack.domain.exceptions import (
    DocTrackException,
    DocumentTypeNotFoundException,
    DuplicateDocumentTypeException,
    DuplicateEmployeeException,
    EmployeeNotFoundException,
    InvalidIdFormatException,
    PaginationOutOfRangeException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "ActiveStatusFilter",
    "DocumentStatus",
    # Exceptions
    "DocTrackException",
    "DocumentTypeNotFoundException",
    "DuplicateDocumentTypeException",
    "DuplicateEmployeeException",
    "EmployeeNotFoundException",
    "InvalidIdFormatException",
    "PaginationOutOfRangeException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
]
