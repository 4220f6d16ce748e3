"""Domain exceptions for the doctrack application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class DocTrackException(Exception):
    """Base exception for all doctrack application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view (type, code, message, details)."""
        return {
            "type": self.__class__.__name__,
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DocTrackException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidIdFormatException(DocTrackException):
    """Raised when an identifier is not a 24-character hex string."""

    def __init__(self, value: str | None, field: str = "id") -> None:
        super().__init__(
            f"Invalid {field} format: {value!r}",
            "INVALID_ID_FORMAT",
            {"field": field, "value": value},
        )


class PaginationOutOfRangeException(DocTrackException):
    """Raised when the requested page lies outside the available pages."""

    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(
            f"Page {page} not found. Total pages: {total_pages}",
            "PAGINATION_OUT_OF_RANGE",
            {"page": page, "total_pages": total_pages},
        )


class ResourceNotFoundException(DocTrackException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Kind of resource (e.g. 'document', 'link').
            resource_id: Identifier that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class EmployeeNotFoundException(DocTrackException):
    """Raised when an employee does not exist or is soft-deleted."""

    def __init__(self, employee_id: str) -> None:
        super().__init__(
            f"Employee not found: {employee_id}",
            "EMPLOYEE_NOT_FOUND",
            {"employee_id": employee_id},
        )


class DocumentTypeNotFoundException(DocTrackException):
    """Raised when a document type does not exist or is soft-deleted."""

    def __init__(self, document_type_id: str) -> None:
        super().__init__(
            f"Document type not found: {document_type_id}",
            "DOCUMENT_TYPE_NOT_FOUND",
            {"document_type_id": document_type_id},
        )


class DuplicateEmployeeException(DocTrackException):
    """Raised when an active employee already holds the given document."""

    def __init__(self, document: str) -> None:
        super().__init__(
            f"An employee with document {document} already exists",
            "DUPLICATE_EMPLOYEE",
            {"document": document},
        )


class DuplicateDocumentTypeException(DocTrackException):
    """Raised when a document type name is already taken (case-insensitive)."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Document type already exists: {name}",
            "DUPLICATE_DOCUMENT_TYPE",
            {"name": name},
        )


class SqlNotConfiguredException(DocTrackException):
    """Raised when the SQL database is not configured (DATABASE_URL unset)."""

    def __init__(
        self,
        message: str = "SQL database is not configured. Set DATABASE_URL.",
    ) -> None:
        super().__init__(message, "SERVICE_UNAVAILABLE")
