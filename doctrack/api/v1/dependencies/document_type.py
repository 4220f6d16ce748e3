"""Document type dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.use_cases.document_types import DocumentTypeService
from doctrack.core.config import get_settings
from doctrack.infrastructure.persistence.database import get_db, get_db_transactional

from ._composition import build_repositories


def _document_type_service(db: AsyncSession) -> DocumentTypeService:
    repos = build_repositories(db)
    return DocumentTypeService(
        document_type_repo=repos.document_types,
        link_repo=repos.links,
        employee_repo=repos.employees,
        max_page_size=get_settings().max_page_size,
    )


async def get_document_type_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DocumentTypeService:
    """DocumentTypeService for read operations."""
    return _document_type_service(db)


async def get_document_type_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> DocumentTypeService:
    """DocumentTypeService bound to a transactional session."""
    return _document_type_service(db)
