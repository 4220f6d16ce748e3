"""Document type operations: create, get, list, update, soft delete, restore, linked employees."""

from __future__ import annotations

from doctrack.application.dtos.document_type import (
    DocumentTypeListFilter,
    DocumentTypeResult,
)
from doctrack.application.dtos.employee import EmployeeResult
from doctrack.application.dtos.pagination import Page
from doctrack.application.interfaces.repositories import (
    IDocumentTypeRepository,
    IEmployeeRepository,
    ILinkRepository,
)
from doctrack.application.services.pagination import (
    MAX_PAGE_SIZE,
    build_pagination,
    clamp_limit,
    empty_page,
    skip_for,
    validate_page,
    validate_page_params,
)
from doctrack.application.services.validation import (
    normalize_document_type_name,
    validate_object_id,
)
from doctrack.domain.exceptions import (
    DocumentTypeNotFoundException,
    DuplicateDocumentTypeException,
)
from doctrack.shared.utils.sanitization import sanitize_text


class DocumentTypeService:
    """Maintain document types. Names are uppercase and unique case-insensitively."""

    def __init__(
        self,
        document_type_repo: IDocumentTypeRepository,
        link_repo: ILinkRepository,
        employee_repo: IEmployeeRepository,
        *,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.document_type_repo = document_type_repo
        self.link_repo = link_repo
        self.employee_repo = employee_repo
        self.max_page_size = max_page_size

    async def create_document_type(
        self,
        name: str,
        description: str | None = None,
        is_identity: bool = False,
    ) -> DocumentTypeResult:
        """Create a document type; raises DuplicateDocumentTypeException on a name clash."""
        normalized = normalize_document_type_name(name)
        if await self.document_type_repo.get_by_name(normalized):
            raise DuplicateDocumentTypeException(normalized)
        return await self.document_type_repo.create_document_type(
            normalized, sanitize_text(description), is_identity
        )

    async def get_document_type(self, document_type_id: str) -> DocumentTypeResult:
        validate_object_id(document_type_id, "document_type_id")
        document_type = await self.document_type_repo.get_by_id(document_type_id)
        if not document_type:
            raise DocumentTypeNotFoundException(document_type_id)
        return document_type

    async def list_document_types(
        self, filters: DocumentTypeListFilter, page: int = 1, limit: int | None = None
    ) -> Page[DocumentTypeResult]:
        limit = clamp_limit(limit, maximum=self.max_page_size)
        validate_page_params(page, limit)
        total = await self.document_type_repo.count_document_types(
            filters.status, filters.name
        )
        validate_page(page, total, limit)
        items = await self.document_type_repo.list_document_types(
            filters.status, filters.name, skip=skip_for(page, limit), limit=limit
        )
        return Page(items=items, pagination=build_pagination(page, limit, total))

    async def update_document_type(
        self,
        document_type_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        is_identity: bool | None = None,
    ) -> DocumentTypeResult:
        """Edit name, description or identity flag of an active document type."""
        current = await self.get_document_type(document_type_id)
        normalized = None
        if name is not None:
            normalized = normalize_document_type_name(name)
            holder = await self.document_type_repo.get_by_name(normalized)
            if holder and holder.id != current.id:
                raise DuplicateDocumentTypeException(normalized)
        updated = await self.document_type_repo.update_document_type(
            current.id,
            name=normalized,
            description=sanitize_text(description),
            is_identity=is_identity,
        )
        if not updated:
            raise DocumentTypeNotFoundException(document_type_id)
        return updated

    async def delete_document_type(self, document_type_id: str) -> DocumentTypeResult:
        """Soft delete. Links stay in place; the type simply stops being required."""
        current = await self.get_document_type(document_type_id)
        deleted = await self.document_type_repo.set_active(current.id, False)
        if not deleted:
            raise DocumentTypeNotFoundException(document_type_id)
        return deleted

    async def restore_document_type(self, document_type_id: str) -> DocumentTypeResult:
        validate_object_id(document_type_id, "document_type_id")
        current = await self.document_type_repo.get_by_id(
            document_type_id, include_inactive=True
        )
        if not current:
            raise DocumentTypeNotFoundException(document_type_id)
        if current.is_active:
            return current
        restored = await self.document_type_repo.set_active(current.id, True)
        if not restored:
            raise DocumentTypeNotFoundException(document_type_id)
        return restored

    async def get_linked_employees(
        self, document_type_id: str, page: int = 1, limit: int | None = None
    ) -> Page[EmployeeResult]:
        """Active employees currently required to provide the type; empty when the type is unknown."""
        limit = clamp_limit(limit, maximum=self.max_page_size)
        validate_object_id(document_type_id, "document_type_id")
        validate_page_params(page, limit)
        if not await self.document_type_repo.get_by_id(document_type_id):
            return empty_page(page, limit)
        total = await self.link_repo.count_linked_employees(document_type_id)
        validate_page(page, total, limit)
        employee_ids = await self.link_repo.list_linked_employee_ids(
            document_type_id, skip=skip_for(page, limit), limit=limit
        )
        employees = await self.employee_repo.get_by_ids(employee_ids)
        return Page(items=employees, pagination=build_pagination(page, limit, total))
