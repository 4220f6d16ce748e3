"""Company-wide pending/sent document aggregation, grouped by employee."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from doctrack.application.dtos.document_type import DocumentTypeResult
from doctrack.application.dtos.documentation import (
    CompanyDocumentFilter,
    CompanyDocumentItem,
    EmployeeDocumentGroup,
)
from doctrack.application.dtos.employee import EmployeeResult
from doctrack.application.dtos.pagination import Page
from doctrack.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IEmployeeRepository,
)
from doctrack.application.interfaces.unit_of_work import IUnitOfWork
from doctrack.application.services.pagination import (
    MAX_PAGE_SIZE,
    clamp_limit,
    empty_page,
    paginate,
    validate_page_params,
)
from doctrack.application.services.validation import validate_object_id
from doctrack.application.use_cases.documentation.documentation_service import (
    unknown_document_type,
)
from doctrack.application.use_cases.documentation.reconciliation import (
    ReconciliationEngine,
)
from doctrack.application.use_cases.documentation.submission_resolver import (
    SubmissionResolver,
)
from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus
from doctrack.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_EMPLOYEE_SCAN_LIMIT = 1000

ItemCollector = Callable[[EmployeeResult], Awaitable[list[CompanyDocumentItem]]]


class DocumentAggregator:
    """Builds paginated, employee-grouped views of pending or sent documents.

    Employees are processed one after another, each inside its own
    savepoint. A failure for one employee is logged and that employee is
    left out of the result; the others still read from a healthy transaction.
    """

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        document_type_repo: IDocumentTypeRepository,
        engine: ReconciliationEngine,
        submission_resolver: SubmissionResolver,
        unit_of_work: IUnitOfWork,
        *,
        employee_scan_limit: int = DEFAULT_EMPLOYEE_SCAN_LIMIT,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self._employee_repo = employee_repo
        self._document_type_repo = document_type_repo
        self._engine = engine
        self._submission_resolver = submission_resolver
        self._unit_of_work = unit_of_work
        self._employee_scan_limit = employee_scan_limit
        self._max_page_size = max_page_size

    async def pending_across_company(
        self, filters: CompanyDocumentFilter
    ) -> Page[EmployeeDocumentGroup]:
        """Pending documents of every active employee (status default: all).

        Raises:
            InvalidIdFormatException: If document_type_id is malformed.
            PaginationOutOfRangeException: If page is beyond the last page.
        """
        return await self._aggregate(
            filters, ActiveStatusFilter.ALL, self._pending_items
        )

    async def sent_across_company(
        self, filters: CompanyDocumentFilter
    ) -> Page[EmployeeDocumentGroup]:
        """Sent documents of every active employee (status default: active).

        Raises:
            InvalidIdFormatException: If document_type_id is malformed.
            PaginationOutOfRangeException: If page is beyond the last page.
        """
        return await self._aggregate(
            filters, ActiveStatusFilter.ACTIVE, self._sent_items
        )

    async def _pending_items(self, employee: EmployeeResult) -> list[CompanyDocumentItem]:
        _, pending = await self._engine.partition(employee.id)
        return [
            CompanyDocumentItem(
                document_type=p.document_type,
                status=DocumentStatus.PENDING,
                is_active=p.link.active,
                required_since=p.link.created_at,
            )
            for p in pending
        ]

    async def _sent_items(self, employee: EmployeeResult) -> list[CompanyDocumentItem]:
        sent_map = await self._submission_resolver.sent_documents(employee.id)
        if not sent_map:
            return []
        types = {
            t.id: t
            for t in await self._document_type_repo.get_by_ids(
                list(sent_map), include_inactive=True
            )
        }
        return [
            CompanyDocumentItem(
                document_type=types.get(type_id) or unknown_document_type(type_id),
                status=document.status,
                is_active=document.is_active,
                value=document.value,
                document_id=document.id,
                updated_at=document.updated_at,
            )
            for type_id, document in sent_map.items()
        ]

    async def _aggregate(
        self,
        filters: CompanyDocumentFilter,
        default_status: ActiveStatusFilter,
        collect: ItemCollector,
    ) -> Page[EmployeeDocumentGroup]:
        status = filters.status or default_status
        limit = clamp_limit(filters.limit, maximum=self._max_page_size)
        validate_page_params(filters.page, limit)

        document_type: DocumentTypeResult | None = None
        if filters.document_type_id:
            validate_object_id(filters.document_type_id, "document_type_id")
            document_type = await self._document_type_repo.get_by_id(
                filters.document_type_id
            )
            if document_type is None:
                return empty_page(filters.page, limit)

        employees = await self._employee_repo.list_employees(
            ActiveStatusFilter.ACTIVE, skip=0, limit=self._employee_scan_limit
        )
        groups: list[EmployeeDocumentGroup] = []
        for employee in employees:
            if not employee.id:
                continue
            try:
                async with self._unit_of_work.savepoint():
                    items = await collect(employee)
            except Exception:
                logger.warning(
                    "Skipping employee %s during document aggregation",
                    employee.id,
                    exc_info=True,
                )
                continue
            group = self._group(employee, items, document_type, status)
            if group is not None:
                groups.append(group)

        groups.sort(key=lambda g: g.employee_name)
        return paginate(groups, filters.page, limit)

    @staticmethod
    def _group(
        employee: EmployeeResult,
        items: list[CompanyDocumentItem],
        document_type: DocumentTypeResult | None,
        status: ActiveStatusFilter,
    ) -> EmployeeDocumentGroup | None:
        """Filter, de-duplicate and sort one employee's items; None when nothing is left."""
        documents: list[CompanyDocumentItem] = []
        seen: set[str] = set()
        for item in items:
            if document_type is not None and item.document_type.id != document_type.id:
                continue
            if not status.matches(item.is_active):
                continue
            if item.document_type.id in seen:
                continue
            seen.add(item.document_type.id)
            documents.append(item)
        if not documents:
            return None
        documents.sort(key=lambda d: d.document_type.name or "")
        return EmployeeDocumentGroup(
            employee_id=employee.id,
            employee_name=employee.name or "",
            employee_document=employee.document or "",
            documents=documents,
        )
