"""Per-employee documentation views built on the reconciliation engine."""

from __future__ import annotations

import math

from doctrack.application.dtos.document import DocumentResult
from doctrack.application.dtos.document_type import DocumentTypeResult
from doctrack.application.dtos.documentation import (
    DocumentationOverview,
    DocumentationSummary,
    EmployeeWithSummary,
    PendingDocumentItem,
    SentDocumentItem,
)
from doctrack.application.dtos.employee import EmployeeResult
from doctrack.application.dtos.link import RequiredDocumentLink
from doctrack.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IEmployeeRepository,
)
from doctrack.application.services.document_values import format_document_for_display
from doctrack.application.services.validation import validate_object_id
from doctrack.application.use_cases.documentation.reconciliation import (
    ReconciliationEngine,
)
from doctrack.application.use_cases.documentation.submission_resolver import (
    SubmissionResolver,
)
from doctrack.domain.exceptions import EmployeeNotFoundException

UNKNOWN_DOCUMENT_TYPE_NAME = "Unknown document type"


def unknown_document_type(document_type_id: str) -> DocumentTypeResult:
    """Placeholder for a document whose type row is missing."""
    return DocumentTypeResult(
        id=document_type_id, name=UNKNOWN_DOCUMENT_TYPE_NAME, is_active=False
    )


def to_sent_item(
    document: DocumentResult, document_type: DocumentTypeResult
) -> SentDocumentItem:
    return SentDocumentItem(
        id=document.id,
        document_type=document_type,
        value=document.value,
        formatted_value=format_document_for_display(document.value),
        status=document.status,
        is_active=document.is_active,
        created_at=document.created_at,
        updated_at=document.updated_at,
    )


def to_pending_item(required: RequiredDocumentLink) -> PendingDocumentItem:
    return PendingDocumentItem(
        document_type=required.document_type,
        is_active=required.link.active,
        required_since=required.link.created_at,
    )


def build_summary(required: int, sent: int) -> DocumentationSummary:
    """Summary counts; completion percentage rounds half up."""
    pending = max(0, required - sent)
    percentage = math.floor(sent * 100 / required + 0.5) if required > 0 else 0
    return DocumentationSummary(
        required=required,
        sent=sent,
        pending=pending,
        has_required_documents=required > 0,
        is_complete=pending == 0 and required > 0,
        completion_percentage=percentage,
    )


class EmployeeDocumentationService:
    """Sent list, pending list, overview and summaries for single employees."""

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        document_type_repo: IDocumentTypeRepository,
        engine: ReconciliationEngine,
        submission_resolver: SubmissionResolver,
    ) -> None:
        self._employee_repo = employee_repo
        self._document_type_repo = document_type_repo
        self._engine = engine
        self._submission_resolver = submission_resolver

    async def _get_employee(self, employee_id: str) -> EmployeeResult:
        validate_object_id(employee_id, "employee_id")
        employee = await self._employee_repo.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundException(employee_id)
        return employee

    async def get_sent_documents(self, employee_id: str) -> list[SentDocumentItem]:
        """Every active SENT document of the employee, linked or not.

        Raises:
            EmployeeNotFoundException: If the employee does not exist.
        """
        await self._get_employee(employee_id)
        sent_map = await self._submission_resolver.sent_documents(employee_id)
        if not sent_map:
            return []
        types = {
            t.id: t
            for t in await self._document_type_repo.get_by_ids(
                list(sent_map), include_inactive=True
            )
        }
        return [
            to_sent_item(doc, types.get(type_id) or unknown_document_type(type_id))
            for type_id, doc in sent_map.items()
        ]

    async def get_pending_documents(
        self, employee_id: str
    ) -> list[PendingDocumentItem]:
        """Required types without a SENT document; [] when nothing is linked.

        Raises:
            EmployeeNotFoundException: If the employee does not exist.
        """
        await self._get_employee(employee_id)
        _, pending = await self._engine.partition(employee_id)
        return [to_pending_item(p) for p in pending]

    async def get_documentation_overview(
        self, employee_id: str
    ) -> DocumentationOverview:
        """Totals and lists of the employee's required documents.

        Raises:
            EmployeeNotFoundException: If the employee does not exist.
        """
        employee = await self._get_employee(employee_id)
        sent, pending = await self._engine.partition(employee_id)
        sent_items = [
            to_sent_item(s.document, s.document_type) for s in sent if s.document
        ]
        timestamps = [s.updated_at for s in sent_items if s.updated_at is not None]
        total = len(sent) + len(pending)
        return DocumentationOverview(
            employee=employee,
            total=total,
            sent=len(sent),
            pending=len(pending),
            is_complete=not pending and total > 0,
            last_updated=max(timestamps) if timestamps else None,
            sent_documents=sent_items,
            pending_documents=[to_pending_item(p) for p in pending],
        )

    async def summarize(self, employee: EmployeeResult) -> DocumentationSummary:
        """Documentation summary for an already-loaded employee."""
        sent, pending = await self._engine.partition(employee.id)
        return build_summary(required=len(sent) + len(pending), sent=len(sent))

    async def enrich(self, employees: list[EmployeeResult]) -> list[EmployeeWithSummary]:
        """Attach a documentation summary to each employee."""
        return [
            EmployeeWithSummary(employee=e, summary=await self.summarize(e))
            for e in employees
        ]
