"""Document and company-wide aggregation dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.use_cases.documentation import DocumentAggregator
from doctrack.application.use_cases.documents import DocumentService
from doctrack.core.config import get_settings
from doctrack.infrastructure.persistence.database import get_db, get_db_transactional
from doctrack.infrastructure.persistence.repositories import DocumentRepository

from ._composition import build_documentation_stack, build_repositories


async def get_document_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DocumentService:
    """DocumentService for read operations."""
    return DocumentService(
        DocumentRepository(db), max_page_size=get_settings().max_page_size
    )


async def get_document_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> DocumentService:
    """DocumentService bound to a transactional session (delete, restore)."""
    return DocumentService(
        DocumentRepository(db), max_page_size=get_settings().max_page_size
    )


async def get_document_aggregator(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DocumentAggregator:
    """Company-wide pending/sent aggregator."""
    return build_documentation_stack(build_repositories(db)).aggregator
