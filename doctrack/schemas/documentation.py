"""Documentation status, overview and company-wide aggregation schemas."""

from datetime import datetime

from doctrack.domain.enums import DocumentStatus
from doctrack.schemas.common import ORMModel
from doctrack.schemas.document_type import DocumentTypeInfo
from doctrack.schemas.employee import EmployeeResponse


class SentItemResponse(ORMModel):
    document_type: DocumentTypeInfo
    value: str


class ReconciliationResponse(ORMModel):
    """Raw reconcile result: required types split into sent and pending."""

    sent: list[SentItemResponse]
    pending: list[DocumentTypeInfo]


class SentDocumentResponse(ORMModel):
    id: str
    document_type: DocumentTypeInfo
    value: str
    formatted_value: str
    status: DocumentStatus
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None


class PendingDocumentResponse(ORMModel):
    document_type: DocumentTypeInfo
    status: DocumentStatus
    value: str | None
    is_active: bool
    required_since: datetime | None


class DocumentationOverviewResponse(ORMModel):
    """Overview: totals plus sent and pending lists."""

    employee: EmployeeResponse
    total: int
    sent: int
    pending: int
    is_complete: bool
    last_updated: datetime | None
    sent_documents: list[SentDocumentResponse]
    pending_documents: list[PendingDocumentResponse]


class LinkResponse(ORMModel):
    id: str
    employee_id: str
    document_type_id: str
    active: bool
    created_at: datetime | None
    updated_at: datetime | None
    deleted_at: datetime | None


class RequiredDocumentResponse(ORMModel):
    """A link with its document type."""

    link: LinkResponse
    document_type: DocumentTypeInfo


class UnlinkResponse(ORMModel):
    unlinked_document_type_ids: list[str]


class CompanyDocumentItemResponse(ORMModel):
    document_type: DocumentTypeInfo
    status: DocumentStatus
    is_active: bool
    value: str | None = None
    document_id: str | None = None
    required_since: datetime | None = None
    updated_at: datetime | None = None


class EmployeeDocumentGroupResponse(ORMModel):
    """One employee and its matching documents in a company-wide view."""

    employee_id: str
    employee_name: str
    employee_document: str
    documents: list[CompanyDocumentItemResponse]
