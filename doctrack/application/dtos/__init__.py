"""Application DTOs (frozen dataclasses). No ORM or framework imports."""

from doctrack.application.dtos.document import DocumentListFilter, DocumentResult
from doctrack.application.dtos.document_type import (
    DocumentTypeListFilter,
    DocumentTypeResult,
)
from doctrack.application.dtos.documentation import (
    CompanyDocumentFilter,
    CompanyDocumentItem,
    DocumentationOverview,
    DocumentationSummary,
    EmployeeDocumentGroup,
    EmployeeWithSummary,
    PendingDocumentItem,
    ReconciliationResult,
    SentDocumentItem,
    SentItem,
)
from doctrack.application.dtos.employee import (
    EmployeeCreate,
    EmployeeListFilter,
    EmployeeResult,
    EmployeeUpdate,
    RequiredDocumentInput,
)
from doctrack.application.dtos.link import LinkResult, RequiredDocumentLink
from doctrack.application.dtos.pagination import Page, PaginationInfo

__all__ = [
    "CompanyDocumentFilter",
    "CompanyDocumentItem",
    "DocumentListFilter",
    "DocumentResult",
    "DocumentTypeListFilter",
    "DocumentTypeResult",
    "DocumentationOverview",
    "DocumentationSummary",
    "EmployeeCreate",
    "EmployeeDocumentGroup",
    "EmployeeListFilter",
    "EmployeeResult",
    "EmployeeUpdate",
    "EmployeeWithSummary",
    "LinkResult",
    "Page",
    "PaginationInfo",
    "PendingDocumentItem",
    "ReconciliationResult",
    "RequiredDocumentInput",
    "RequiredDocumentLink",
    "SentDocumentItem",
    "SentItem",
]
