"""Base repository: generic get/create/update, soft delete and status filtering."""

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.domain.enums import ActiveStatusFilter
from doctrack.infrastructure.persistence.database import Base
from doctrack.shared.utils.datetime import utc_now


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, create, update, soft delete and hooks.

    Rows are never deleted physically: _set_active flips the active flag
    (named by active_attr) and stamps or clears deleted_at. Subclasses
    override _on_after_create / _on_after_update for side effects.
    """

    active_attr: str = "is_active"

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @property
    def _active_column(self) -> Any:
        return getattr(self.model, self.active_attr)

    def _with_status(self, stmt: Select, status: ActiveStatusFilter) -> Select:
        """Apply an active/inactive/all filter to stmt."""
        if status is ActiveStatusFilter.ACTIVE:
            return stmt.where(self._active_column.is_(True))
        if status is ActiveStatusFilter.INACTIVE:
            return stmt.where(self._active_column.is_(False))
        return stmt

    async def get_by_id(
        self, entity_id: str, *, include_inactive: bool = False
    ) -> ModelType | None:
        """Return a single record by primary key, or None. Soft-deleted rows need include_inactive."""
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id)
        if not include_inactive:
            stmt = stmt.where(self._active_column.is_(True))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _count(self, stmt: Select) -> int:
        """Return the row count of stmt (wrapped as a subquery)."""
        result = await self.db.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        )
        return int(result.scalar_one())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and run _on_after_create hook."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and run _on_after_update hook."""
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def _set_active(self, obj: ModelType, active: bool) -> ModelType:
        """Soft delete (active=False) or restore (active=True) obj."""
        entity: Any = obj
        setattr(entity, self.active_attr, active)
        entity.deleted_at = None if active else utc_now()
        return await self.update(obj)

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to emit events or logs."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to emit events or logs."""
