"""Pytest configuration and fixtures for doctrack.

Uses doctrack.main:app for HTTP tests and doctrack.infrastructure.persistence.database
for DB-dependent fixtures. The fake_client fixture swaps every service
dependency for one built on in-memory repositories.
"""

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.api.v1 import dependencies as deps
from doctrack.api.v1.dependencies._composition import (
    Repositories,
    build_documentation_stack,
)
from doctrack.application.use_cases.document_types import DocumentTypeService
from doctrack.application.use_cases.documents import DocumentService
from doctrack.application.use_cases.employees import (
    DocumentRequirementCoordinator,
    EmployeeService,
)
from doctrack.core.config import get_settings
from doctrack.core.limiter import limiter
from doctrack.infrastructure.persistence import database
from doctrack.main import app
from tests.fakes import FakeStore


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Write endpoints are rate limited per client address; start each test fresh."""
    limiter.reset()


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def store() -> FakeStore:
    """Fresh in-memory repositories."""
    return FakeStore()


@pytest.fixture
def repositories(store: FakeStore) -> Repositories:
    return Repositories(
        employees=store.employees,
        document_types=store.document_types,
        links=store.links,
        documents=store.documents,
        unit_of_work=store.unit_of_work,
    )


@pytest.fixture
async def fake_client(
    store: FakeStore, repositories: Repositories
) -> AsyncIterator[AsyncClient]:
    """HTTP client whose services run on the in-memory store (no database)."""
    stack = build_documentation_stack(repositories)
    employee_service = EmployeeService(
        employee_repo=store.employees,
        link_repo=store.links,
        document_type_repo=store.document_types,
        documentation=stack.documentation,
    )
    coordinator = DocumentRequirementCoordinator(
        employee_repo=store.employees,
        document_type_repo=store.document_types,
        link_repo=store.links,
        document_repo=store.documents,
    )
    document_type_service = DocumentTypeService(
        document_type_repo=store.document_types,
        link_repo=store.links,
        employee_repo=store.employees,
    )
    document_service = DocumentService(store.documents)

    overrides = {
        deps.get_employee_service: lambda: employee_service,
        deps.get_employee_service_for_write: lambda: employee_service,
        deps.get_requirement_coordinator: lambda: coordinator,
        deps.get_documentation_service: lambda: stack.documentation,
        deps.get_reconciliation_engine: lambda: stack.engine,
        deps.get_document_type_service: lambda: document_type_service,
        deps.get_document_type_service_for_write: lambda: document_type_service,
        deps.get_document_service: lambda: document_service,
        deps.get_document_service_for_write: lambda: document_service,
        deps.get_document_aggregator: lambda: stack.aggregator,
    }
    app.dependency_overrides.update(overrides)
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (PostgreSQL, migrated with `alembic upgrade head`).
    Skips when it is not configured. Mark such tests with
    @pytest.mark.requires_db; run without DB via: pytest -m 'not requires_db'.
    """
    if not get_settings().sql_enabled:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database._session_factory()() as session:
        yield session
        await session.rollback()
