"""Employee and required-document dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.use_cases.documentation import (
    EmployeeDocumentationService,
    ReconciliationEngine,
)
from doctrack.application.use_cases.employees import (
    DocumentRequirementCoordinator,
    EmployeeService,
)
from doctrack.core.config import get_settings
from doctrack.infrastructure.persistence.database import get_db, get_db_transactional

from ._composition import build_documentation_stack, build_repositories


def _employee_service(db: AsyncSession) -> EmployeeService:
    settings = get_settings()
    repos = build_repositories(db)
    stack = build_documentation_stack(repos)
    return EmployeeService(
        employee_repo=repos.employees,
        link_repo=repos.links,
        document_type_repo=repos.document_types,
        documentation=stack.documentation,
        default_page_size=settings.employee_list_page_size,
        max_page_size=settings.max_page_size,
    )


async def get_employee_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeService:
    """EmployeeService for read operations (get, list, search, required documents)."""
    return _employee_service(db)


async def get_employee_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> EmployeeService:
    """EmployeeService bound to a transactional session (update, delete, restore)."""
    return _employee_service(db)


async def get_requirement_coordinator(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> DocumentRequirementCoordinator:
    """Coordinator for create/link/unlink/send/restore-link; one transaction per request."""
    repos = build_repositories(db)
    return DocumentRequirementCoordinator(
        employee_repo=repos.employees,
        document_type_repo=repos.document_types,
        link_repo=repos.links,
        document_repo=repos.documents,
        identity_type_names=get_settings().identity_type_names,
    )


async def get_documentation_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeDocumentationService:
    """Per-employee sent/pending/overview views."""
    return build_documentation_stack(build_repositories(db)).documentation


async def get_reconciliation_engine(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReconciliationEngine:
    return build_documentation_stack(build_repositories(db)).engine
