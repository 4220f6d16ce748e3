"""DTOs for employee/document type links (required documents)."""

from dataclasses import dataclass
from datetime import datetime

from doctrack.application.dtos.document_type import DocumentTypeResult


@dataclass(frozen=True)
class LinkResult:
    """EmployeeDocumentTypeLink read-model. active is the per-link soft delete."""

    id: str
    employee_id: str
    document_type_id: str
    active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class RequiredDocumentLink:
    """A link resolved to its document type."""

    link: LinkResult
    document_type: DocumentTypeResult
