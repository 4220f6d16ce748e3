"""DTOs for document type use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from doctrack.domain.enums import ActiveStatusFilter


@dataclass(frozen=True)
class DocumentTypeResult:
    """Document type read-model. Name is stored uppercase."""

    id: str
    name: str
    description: str | None = None
    is_identity: bool = False
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class DocumentTypeListFilter:
    """Filters for listing document types."""

    status: ActiveStatusFilter = ActiveStatusFilter.ALL
    name: str | None = None
