"""Document repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.dtos.document import DocumentListFilter, DocumentResult
from doctrack.domain.enums import DocumentStatus
from doctrack.infrastructure.persistence.models.document import Document
from doctrack.infrastructure.persistence.repositories.base import BaseRepository
from doctrack.shared.utils.datetime import ensure_utc, utc_now


def _to_result(d: Document) -> DocumentResult:
    """Map ORM Document to DocumentResult."""
    return DocumentResult(
        id=d.id,
        value=d.value,
        status=DocumentStatus(d.status),
        employee_id=d.employee_id,
        document_type_id=d.document_type_id,
        is_active=d.is_active,
        created_at=ensure_utc(d.created_at),
        updated_at=ensure_utc(d.updated_at),
        deleted_at=ensure_utc(d.deleted_at),
    )


class DocumentRepository(BaseRepository[Document]):
    """Document persistence. At most one active document per (employee, type)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Document)

    async def get_by_id(
        self, document_id: str, *, include_inactive: bool = False
    ) -> DocumentResult | None:
        row = await super().get_by_id(document_id, include_inactive=include_inactive)
        return _to_result(row) if row else None

    async def get_active_for_pair(
        self, employee_id: str, document_type_id: str
    ) -> DocumentResult | None:
        result = await self.db.execute(
            select(Document)
            .where(
                Document.employee_id == employee_id,
                Document.document_type_id == document_type_id,
                Document.is_active.is_(True),
            )
            .order_by(Document.created_at.asc())
        )
        row = result.scalars().first()
        return _to_result(row) if row else None

    async def list_sent_by_employee(
        self, employee_id: str, document_type_ids: list[str] | None = None
    ) -> list[DocumentResult]:
        stmt = select(Document).where(
            Document.employee_id == employee_id,
            Document.status == DocumentStatus.SENT,
            Document.is_active.is_(True),
        )
        if document_type_ids is not None:
            if not document_type_ids:
                return []
            stmt = stmt.where(Document.document_type_id.in_(document_type_ids))
        result = await self.db.execute(
            stmt.order_by(Document.created_at.asc(), Document.id.asc())
        )
        return [_to_result(d) for d in result.scalars().all()]

    def _list_stmt(self, filters: DocumentListFilter) -> Select:
        stmt = select(Document)
        if not filters.include_inactive:
            stmt = stmt.where(Document.is_active.is_(True))
        if filters.employee_id:
            stmt = stmt.where(Document.employee_id == filters.employee_id)
        if filters.document_type_id:
            stmt = stmt.where(Document.document_type_id == filters.document_type_id)
        if filters.status is not None:
            stmt = stmt.where(Document.status == filters.status)
        return stmt

    async def list_documents(
        self, filters: DocumentListFilter, skip: int = 0, limit: int = 100
    ) -> list[DocumentResult]:
        result = await self.db.execute(
            self._list_stmt(filters)
            .order_by(Document.created_at.desc(), Document.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(d) for d in result.scalars().all()]

    async def count_documents(self, filters: DocumentListFilter) -> int:
        return await self._count(self._list_stmt(filters))

    async def create_document(
        self,
        employee_id: str,
        document_type_id: str,
        value: str,
        status: DocumentStatus,
    ) -> DocumentResult:
        created = await self.create(
            Document(
                employee_id=employee_id,
                document_type_id=document_type_id,
                value=value,
                status=status,
                is_active=True,
            )
        )
        return _to_result(created)

    async def update_document(
        self,
        document_id: str,
        *,
        value: str | None = None,
        status: DocumentStatus | None = None,
    ) -> DocumentResult | None:
        entity = await super().get_by_id(document_id)
        if not entity:
            return None
        if value is not None:
            entity.value = value
        if status is not None:
            entity.status = status
        # Explicit stamp: func.now() is fixed for the whole transaction.
        entity.updated_at = utc_now()
        updated = await self.update(entity)
        return _to_result(updated)

    async def set_active(
        self, document_id: str, is_active: bool
    ) -> DocumentResult | None:
        entity = await super().get_by_id(document_id, include_inactive=True)
        if not entity:
            return None
        updated = await self._set_active(entity, is_active)
        return _to_result(updated)
