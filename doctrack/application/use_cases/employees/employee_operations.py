"""Employee operations: get, list, search, update, soft delete, restore, required documents."""

from __future__ import annotations

from doctrack.application.dtos.documentation import EmployeeWithSummary
from doctrack.application.dtos.employee import (
    EmployeeListFilter,
    EmployeeResult,
    EmployeeUpdate,
)
from doctrack.application.dtos.link import RequiredDocumentLink
from doctrack.application.dtos.pagination import Page
from doctrack.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IEmployeeRepository,
    ILinkRepository,
)
from doctrack.application.services.document_values import cpf_search_pattern
from doctrack.application.services.pagination import (
    MAX_PAGE_SIZE,
    build_pagination,
    clamp_limit,
    skip_for,
    validate_page,
    validate_page_params,
)
from doctrack.application.services.validation import (
    validate_employee_document,
    validate_employee_name,
    validate_object_id,
)
from doctrack.application.use_cases.documentation.documentation_service import (
    EmployeeDocumentationService,
    unknown_document_type,
)
from doctrack.domain.enums import ActiveStatusFilter
from doctrack.domain.exceptions import (
    DuplicateEmployeeException,
    EmployeeNotFoundException,
    ValidationException,
)


class EmployeeService:
    """Read and maintain employees. Creation lives in DocumentRequirementCoordinator."""

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        link_repo: ILinkRepository,
        document_type_repo: IDocumentTypeRepository,
        documentation: EmployeeDocumentationService,
        *,
        default_page_size: int = 20,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.employee_repo = employee_repo
        self.link_repo = link_repo
        self.document_type_repo = document_type_repo
        self.documentation = documentation
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def _page_size(self, limit: int | None) -> int:
        return clamp_limit(
            limit, default=self.default_page_size, maximum=self.max_page_size
        )

    async def get_employee(self, employee_id: str) -> EmployeeResult:
        """Return an active employee or raise EmployeeNotFoundException."""
        validate_object_id(employee_id, "employee_id")
        employee = await self.employee_repo.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundException(employee_id)
        return employee

    async def list_employees(
        self, filters: EmployeeListFilter, page: int = 1, limit: int | None = None
    ) -> Page[EmployeeResult]:
        """List employees ordered by name.

        limit is clamped into [1, max_page_size]; None means the default page size.

        Raises:
            ValidationException: Non-positive page.
            PaginationOutOfRangeException: Page beyond the last page.
        """
        limit = self._page_size(limit)
        validate_page_params(page, limit)
        total = await self.employee_repo.count_employees(filters.status, filters.name)
        validate_page(page, total, limit)
        items = await self.employee_repo.list_employees(
            filters.status, filters.name, skip=skip_for(page, limit), limit=limit
        )
        return Page(items=items, pagination=build_pagination(page, limit, total))

    async def search_employees(
        self,
        query: str,
        status: ActiveStatusFilter = ActiveStatusFilter.ALL,
        page: int = 1,
        limit: int | None = None,
    ) -> Page[EmployeeWithSummary]:
        """Search by name (case-insensitive) or document; 11 raw digits match a formatted CPF.

        Results carry a documentation summary.
        """
        term = (query or "").strip()
        if not term:
            raise ValidationException("Search query is required", field="query")
        limit = self._page_size(limit)
        validate_page_params(page, limit)
        pattern = cpf_search_pattern(term)
        total = await self.employee_repo.count_search(term, pattern, status)
        validate_page(page, total, limit)
        employees = await self.employee_repo.search(
            term, pattern, status, skip=skip_for(page, limit), limit=limit
        )
        return Page(
            items=await self.documentation.enrich(employees),
            pagination=build_pagination(page, limit, total),
        )

    async def update_employee(
        self, employee_id: str, data: EmployeeUpdate
    ) -> EmployeeResult:
        """Update name, document or hire date. Document stays unique among active employees."""
        current = await self.get_employee(employee_id)
        name = validate_employee_name(data.name) if data.name is not None else None
        document = None
        if data.document is not None:
            document = validate_employee_document(data.document)
            if document != current.document:
                holder = await self.employee_repo.get_by_document(document)
                if holder and holder.id != current.id:
                    raise DuplicateEmployeeException(document)
        updated = await self.employee_repo.update_employee(
            current.id, name=name, document=document, hired_at=data.hired_at
        )
        if not updated:
            raise EmployeeNotFoundException(employee_id)
        return updated

    async def delete_employee(self, employee_id: str) -> EmployeeResult:
        """Soft delete an active employee."""
        current = await self.get_employee(employee_id)
        deleted = await self.employee_repo.set_active(current.id, False)
        if not deleted:
            raise EmployeeNotFoundException(employee_id)
        return deleted

    async def restore_employee(self, employee_id: str) -> EmployeeResult:
        """Restore a soft-deleted employee (no-op when already active).

        Raises:
            DuplicateEmployeeException: Another active employee took the document meanwhile.
        """
        validate_object_id(employee_id, "employee_id")
        current = await self.employee_repo.get_by_id(employee_id, include_inactive=True)
        if not current:
            raise EmployeeNotFoundException(employee_id)
        if current.is_active:
            return current
        holder = await self.employee_repo.get_by_document(current.document)
        if holder and holder.id != current.id:
            raise DuplicateEmployeeException(current.document)
        restored = await self.employee_repo.set_active(current.id, True)
        if not restored:
            raise EmployeeNotFoundException(employee_id)
        return restored

    async def get_required_documents(
        self,
        employee_id: str,
        status: ActiveStatusFilter = ActiveStatusFilter.ACTIVE,
    ) -> list[RequiredDocumentLink]:
        """Links of the employee (filtered by link state) with their document types."""
        employee = await self.get_employee(employee_id)
        links = await self.link_repo.list_by_employee(employee.id, status)
        if not links:
            return []
        types = {
            t.id: t
            for t in await self.document_type_repo.get_by_ids(
                list({link.document_type_id for link in links}), include_inactive=True
            )
        }
        return [
            RequiredDocumentLink(
                link=link,
                document_type=types.get(link.document_type_id)
                or unknown_document_type(link.document_type_id),
            )
            for link in links
        ]
