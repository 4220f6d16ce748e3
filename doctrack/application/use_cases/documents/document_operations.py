"""Document operations: list, get, soft delete, restore."""

from __future__ import annotations

from doctrack.application.dtos.document import DocumentListFilter, DocumentResult
from doctrack.application.dtos.pagination import Page
from doctrack.application.interfaces.repositories import IDocumentRepository
from doctrack.application.services.pagination import (
    MAX_PAGE_SIZE,
    build_pagination,
    clamp_limit,
    skip_for,
    validate_page,
    validate_page_params,
)
from doctrack.application.services.validation import validate_object_id
from doctrack.domain.exceptions import ResourceNotFoundException, ValidationException


class DocumentService:
    """Query and soft-delete individual Document records."""

    def __init__(
        self, document_repo: IDocumentRepository, *, max_page_size: int = MAX_PAGE_SIZE
    ) -> None:
        self.document_repo = document_repo
        self.max_page_size = max_page_size

    async def list_documents(
        self, filters: DocumentListFilter, page: int = 1, limit: int | None = None
    ) -> Page[DocumentResult]:
        limit = clamp_limit(limit, maximum=self.max_page_size)
        if filters.employee_id:
            validate_object_id(filters.employee_id, "employee_id")
        if filters.document_type_id:
            validate_object_id(filters.document_type_id, "document_type_id")
        validate_page_params(page, limit)
        total = await self.document_repo.count_documents(filters)
        validate_page(page, total, limit)
        items = await self.document_repo.list_documents(
            filters, skip=skip_for(page, limit), limit=limit
        )
        return Page(items=items, pagination=build_pagination(page, limit, total))

    async def get_document(self, document_id: str) -> DocumentResult:
        validate_object_id(document_id, "document_id")
        document = await self.document_repo.get_by_id(document_id)
        if not document:
            raise ResourceNotFoundException("document", document_id)
        return document

    async def delete_document(self, document_id: str) -> DocumentResult:
        current = await self.get_document(document_id)
        deleted = await self.document_repo.set_active(current.id, False)
        if not deleted:
            raise ResourceNotFoundException("document", document_id)
        return deleted

    async def restore_document(self, document_id: str) -> DocumentResult:
        """Restore a soft-deleted document unless the pair already has an active one."""
        validate_object_id(document_id, "document_id")
        current = await self.document_repo.get_by_id(document_id, include_inactive=True)
        if not current:
            raise ResourceNotFoundException("document", document_id)
        if current.is_active:
            return current
        active = await self.document_repo.get_active_for_pair(
            current.employee_id, current.document_type_id
        )
        if active and active.id != current.id:
            raise ValidationException(
                "Another active document exists for this employee and document type",
                field="document_id",
            )
        restored = await self.document_repo.set_active(current.id, True)
        if not restored:
            raise ResourceNotFoundException("document", document_id)
        return restored
