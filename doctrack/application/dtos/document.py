"""DTOs for document use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from doctrack.domain.enums import DocumentStatus


@dataclass(frozen=True)
class DocumentResult:
    """Document read-model (one submission record for an employee and type)."""

    id: str
    value: str
    status: DocumentStatus
    employee_id: str
    document_type_id: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class DocumentListFilter:
    """Filters for listing documents. None means no constraint."""

    employee_id: str | None = None
    document_type_id: str | None = None
    status: DocumentStatus | None = None
    include_inactive: bool = False
