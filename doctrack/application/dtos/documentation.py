"""DTOs for reconciliation, per-employee documentation views and aggregation."""

from dataclasses import dataclass, field
from datetime import datetime

from doctrack.application.dtos.document import DocumentResult
from doctrack.application.dtos.document_type import DocumentTypeResult
from doctrack.application.dtos.employee import EmployeeResult
from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus


@dataclass(frozen=True)
class SentItem:
    """A required document type that has a SENT document, with its value."""

    document_type: DocumentTypeResult
    value: str
    document: DocumentResult | None = None


@dataclass(frozen=True)
class ReconciliationResult:
    """Partition of an employee's required types into sent and pending."""

    sent: list[SentItem] = field(default_factory=list)
    pending: list[DocumentTypeResult] = field(default_factory=list)


@dataclass(frozen=True)
class SentDocumentItem:
    """A submitted document with its type (per-employee sent view)."""

    id: str
    document_type: DocumentTypeResult
    value: str
    formatted_value: str
    status: DocumentStatus
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class PendingDocumentItem:
    """A required document type without a SENT document."""

    document_type: DocumentTypeResult
    is_active: bool
    required_since: datetime | None
    status: DocumentStatus = DocumentStatus.PENDING
    value: str | None = None


@dataclass(frozen=True)
class DocumentationOverview:
    """Per-employee totals plus the sent and pending lists."""

    employee: EmployeeResult
    total: int
    sent: int
    pending: int
    is_complete: bool
    last_updated: datetime | None
    sent_documents: list[SentDocumentItem]
    pending_documents: list[PendingDocumentItem]


@dataclass(frozen=True)
class DocumentationSummary:
    """Compact compliance summary used to enrich employee listings."""

    required: int
    sent: int
    pending: int
    has_required_documents: bool
    is_complete: bool
    completion_percentage: int


@dataclass(frozen=True)
class EmployeeWithSummary:
    """Employee plus its documentation summary."""

    employee: EmployeeResult
    summary: DocumentationSummary


@dataclass(frozen=True)
class CompanyDocumentFilter:
    """Filters for company-wide pending/sent aggregation.

    status None means the operation's own default (all for pending,
    active for sent).
    """

    status: ActiveStatusFilter | None = None
    page: int = 1
    limit: int = 10
    document_type_id: str | None = None


@dataclass(frozen=True)
class CompanyDocumentItem:
    """One (employee, document type) tuple in a company-wide view."""

    document_type: DocumentTypeResult
    status: DocumentStatus
    is_active: bool
    value: str | None = None
    document_id: str | None = None
    required_since: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class EmployeeDocumentGroup:
    """Company-wide view entry: one employee and its matching documents."""

    employee_id: str
    employee_name: str
    employee_document: str
    documents: list[CompanyDocumentItem]
