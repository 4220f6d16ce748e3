"""DocumentType repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.dtos.document_type import DocumentTypeResult
from doctrack.domain.enums import ActiveStatusFilter
from doctrack.infrastructure.persistence.models.document_type import DocumentType
from doctrack.infrastructure.persistence.repositories.base import BaseRepository
from doctrack.shared.utils.datetime import ensure_utc


def _to_result(t: DocumentType) -> DocumentTypeResult:
    """Map ORM DocumentType to DocumentTypeResult."""
    return DocumentTypeResult(
        id=t.id,
        name=t.name,
        description=t.description,
        is_identity=t.is_identity,
        is_active=t.is_active,
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        deleted_at=ensure_utc(t.deleted_at),
    )


class DocumentTypeRepository(BaseRepository[DocumentType]):
    """Document type persistence. Names are compared case-insensitively."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DocumentType)

    async def get_by_id(
        self, document_type_id: str, *, include_inactive: bool = False
    ) -> DocumentTypeResult | None:
        row = await super().get_by_id(
            document_type_id, include_inactive=include_inactive
        )
        return _to_result(row) if row else None

    async def get_by_ids(
        self, document_type_ids: list[str], *, include_inactive: bool = False
    ) -> list[DocumentTypeResult]:
        if not document_type_ids:
            return []
        stmt = select(DocumentType).where(DocumentType.id.in_(document_type_ids))
        if not include_inactive:
            stmt = stmt.where(DocumentType.is_active.is_(True))
        result = await self.db.execute(stmt)
        return [_to_result(t) for t in result.scalars().all()]

    async def get_by_name(self, name: str) -> DocumentTypeResult | None:
        result = await self.db.execute(
            select(DocumentType).where(
                func.lower(DocumentType.name) == name.strip().lower()
            )
        )
        row = result.scalars().first()
        return _to_result(row) if row else None

    def _list_stmt(self, status: ActiveStatusFilter, name: str | None) -> Select:
        stmt = self._with_status(select(DocumentType), status)
        if name:
            stmt = stmt.where(
                DocumentType.name.icontains(name.strip(), autoescape=True)
            )
        return stmt

    async def list_document_types(
        self,
        status: ActiveStatusFilter,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[DocumentTypeResult]:
        result = await self.db.execute(
            self._list_stmt(status, name)
            .order_by(DocumentType.name.asc())
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def count_document_types(
        self, status: ActiveStatusFilter, name: str | None = None
    ) -> int:
        return await self._count(self._list_stmt(status, name))

    async def create_document_type(
        self, name: str, description: str | None, is_identity: bool
    ) -> DocumentTypeResult:
        created = await self.create(
            DocumentType(
                name=name,
                description=description,
                is_identity=is_identity,
                is_active=True,
            )
        )
        return _to_result(created)

    async def update_document_type(
        self,
        document_type_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        is_identity: bool | None = None,
    ) -> DocumentTypeResult | None:
        entity = await super().get_by_id(document_type_id)
        if not entity:
            return None
        if name is not None:
            entity.name = name
        if description is not None:
            entity.description = description
        if is_identity is not None:
            entity.is_identity = is_identity
        updated = await self.update(entity)
        return _to_result(updated)

    async def set_active(
        self, document_type_id: str, is_active: bool
    ) -> DocumentTypeResult | None:
        entity = await super().get_by_id(document_type_id, include_inactive=True)
        if not entity:
            return None
        updated = await self._set_active(entity, is_active)
        return _to_result(updated)
