"""ORM models. Import here so Alembic and metadata see every table."""

from doctrack.infrastructure.persistence.models.document import Document
from doctrack.infrastructure.persistence.models.document_type import DocumentType
from doctrack.infrastructure.persistence.models.employee import Employee
from doctrack.infrastructure.persistence.models.employee_document_type_link import (
    EmployeeDocumentTypeLink,
)

__all__ = [
    "Document",
    "DocumentType",
    "Employee",
    "EmployeeDocumentTypeLink",
]
