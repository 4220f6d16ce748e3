"""Employee repository. Returns application DTOs."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.dtos.employee import EmployeeResult
from doctrack.domain.enums import ActiveStatusFilter
from doctrack.infrastructure.persistence.models.employee import Employee
from doctrack.infrastructure.persistence.repositories.base import BaseRepository
from doctrack.shared.utils.datetime import ensure_utc


def _to_result(e: Employee) -> EmployeeResult:
    """Map ORM Employee to EmployeeResult."""
    return EmployeeResult(
        id=e.id,
        name=e.name,
        document=e.document,
        hired_at=ensure_utc(e.hired_at),
        is_active=e.is_active,
        created_at=ensure_utc(e.created_at),
        updated_at=ensure_utc(e.updated_at),
        deleted_at=ensure_utc(e.deleted_at),
    )


class EmployeeRepository(BaseRepository[Employee]):
    """Employee persistence. Ordered by name for every list."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Employee)

    async def get_by_id(
        self, employee_id: str, *, include_inactive: bool = False
    ) -> EmployeeResult | None:
        row = await super().get_by_id(employee_id, include_inactive=include_inactive)
        return _to_result(row) if row else None

    async def get_by_document(self, document: str) -> EmployeeResult | None:
        result = await self.db.execute(
            select(Employee).where(
                Employee.document == document, Employee.is_active.is_(True)
            )
        )
        row = result.scalars().first()
        return _to_result(row) if row else None

    async def get_by_ids(self, employee_ids: list[str]) -> list[EmployeeResult]:
        if not employee_ids:
            return []
        result = await self.db.execute(
            select(Employee)
            .where(Employee.id.in_(employee_ids), Employee.is_active.is_(True))
            .order_by(Employee.name.asc(), Employee.id.asc())
        )
        return [_to_result(e) for e in result.scalars().all()]

    def _list_stmt(self, status: ActiveStatusFilter, name: str | None) -> Select:
        stmt = self._with_status(select(Employee), status)
        if name:
            stmt = stmt.where(Employee.name.icontains(name.strip(), autoescape=True))
        return stmt

    async def list_employees(
        self,
        status: ActiveStatusFilter,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[EmployeeResult]:
        result = await self.db.execute(
            self._list_stmt(status, name)
            .order_by(Employee.name.asc(), Employee.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def count_employees(
        self, status: ActiveStatusFilter, name: str | None = None
    ) -> int:
        return await self._count(self._list_stmt(status, name))

    def _search_stmt(
        self, query: str, document_pattern: str | None, status: ActiveStatusFilter
    ) -> Select:
        term = query.strip()
        conditions = [
            Employee.name.icontains(term, autoescape=True),
            Employee.document == term,
        ]
        if document_pattern:
            conditions.append(Employee.document.regexp_match(document_pattern))
        return self._with_status(select(Employee), status).where(or_(*conditions))

    async def search(
        self,
        query: str,
        document_pattern: str | None,
        status: ActiveStatusFilter,
        skip: int = 0,
        limit: int = 100,
    ) -> list[EmployeeResult]:
        result = await self.db.execute(
            self._search_stmt(query, document_pattern, status)
            .order_by(Employee.name.asc(), Employee.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def count_search(
        self, query: str, document_pattern: str | None, status: ActiveStatusFilter
    ) -> int:
        return await self._count(self._search_stmt(query, document_pattern, status))

    async def create_employee(
        self, name: str, document: str, hired_at: datetime
    ) -> EmployeeResult:
        created = await self.create(
            Employee(name=name, document=document, hired_at=hired_at, is_active=True)
        )
        return _to_result(created)

    async def update_employee(
        self,
        employee_id: str,
        *,
        name: str | None = None,
        document: str | None = None,
        hired_at: datetime | None = None,
    ) -> EmployeeResult | None:
        entity = await super().get_by_id(employee_id)
        if not entity:
            return None
        if name is not None:
            entity.name = name
        if document is not None:
            entity.document = document
        if hired_at is not None:
            entity.hired_at = hired_at
        updated = await self.update(entity)
        return _to_result(updated)

    async def set_active(
        self, employee_id: str, is_active: bool
    ) -> EmployeeResult | None:
        entity = await super().get_by_id(employee_id, include_inactive=True)
        if not entity:
            return None
        updated = await self._set_active(entity, is_active)
        return _to_result(updated)
