"""EmployeeDocumentTypeLink repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.dtos.link import LinkResult
from doctrack.domain.enums import ActiveStatusFilter
from doctrack.infrastructure.persistence.models.employee import Employee
from doctrack.infrastructure.persistence.models.employee_document_type_link import (
    EmployeeDocumentTypeLink,
)
from doctrack.infrastructure.persistence.repositories.base import BaseRepository
from doctrack.shared.utils.datetime import ensure_utc


def _to_result(link: EmployeeDocumentTypeLink) -> LinkResult:
    """Map ORM EmployeeDocumentTypeLink to LinkResult."""
    return LinkResult(
        id=link.id,
        employee_id=link.employee_id,
        document_type_id=link.document_type_id,
        active=link.active,
        created_at=ensure_utc(link.created_at),
        updated_at=ensure_utc(link.updated_at),
        deleted_at=ensure_utc(link.deleted_at),
    )


class LinkRepository(BaseRepository[EmployeeDocumentTypeLink]):
    """Required-document links. One row per (employee, type); active is the soft delete."""

    active_attr = "active"

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, EmployeeDocumentTypeLink)

    async def list_by_employee(
        self, employee_id: str, status: ActiveStatusFilter = ActiveStatusFilter.ACTIVE
    ) -> list[LinkResult]:
        stmt = self._with_status(
            select(EmployeeDocumentTypeLink).where(
                EmployeeDocumentTypeLink.employee_id == employee_id
            ),
            status,
        ).order_by(
            EmployeeDocumentTypeLink.created_at.asc(),
            EmployeeDocumentTypeLink.id.asc(),
        )
        result = await self.db.execute(stmt)
        return [_to_result(link) for link in result.scalars().all()]

    async def get_by_employee_and_type(
        self, employee_id: str, document_type_id: str
    ) -> LinkResult | None:
        row = await self._get_pair(employee_id, document_type_id)
        return _to_result(row) if row else None

    async def _get_pair(
        self, employee_id: str, document_type_id: str
    ) -> EmployeeDocumentTypeLink | None:
        result = await self.db.execute(
            select(EmployeeDocumentTypeLink).where(
                EmployeeDocumentTypeLink.employee_id == employee_id,
                EmployeeDocumentTypeLink.document_type_id == document_type_id,
            )
        )
        return result.scalar_one_or_none()

    async def create_link(self, employee_id: str, document_type_id: str) -> LinkResult:
        created = await self.create(
            EmployeeDocumentTypeLink(
                employee_id=employee_id,
                document_type_id=document_type_id,
                active=True,
            )
        )
        return _to_result(created)

    async def set_active(self, link_id: str, active: bool) -> LinkResult | None:
        entity = await super().get_by_id(link_id, include_inactive=True)
        if not entity:
            return None
        updated = await self._set_active(entity, active)
        return _to_result(updated)

    def _linked_employees_stmt(self, document_type_id: str) -> Select:
        return (
            select(EmployeeDocumentTypeLink.employee_id)
            .join(Employee, Employee.id == EmployeeDocumentTypeLink.employee_id)
            .where(
                EmployeeDocumentTypeLink.document_type_id == document_type_id,
                EmployeeDocumentTypeLink.active.is_(True),
                Employee.is_active.is_(True),
            )
        )

    async def list_linked_employee_ids(
        self, document_type_id: str, skip: int = 0, limit: int = 100
    ) -> list[str]:
        result = await self.db.execute(
            self._linked_employees_stmt(document_type_id)
            .order_by(Employee.name.asc(), Employee.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_linked_employees(self, document_type_id: str) -> int:
        return await self._count(self._linked_employees_stmt(document_type_id))
