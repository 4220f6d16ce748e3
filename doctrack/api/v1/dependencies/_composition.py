"""Shared wiring for the composition root: repositories, unit of work and the documentation stack."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from doctrack.application.interfaces.unit_of_work import IUnitOfWork
from doctrack.application.use_cases.documentation import (
    DocumentAggregator,
    EmployeeDocumentationService,
    LinkResolver,
    ReconciliationEngine,
    SubmissionResolver,
)
from doctrack.core.config import get_settings
from doctrack.infrastructure.persistence.repositories import (
    DocumentRepository,
    DocumentTypeRepository,
    EmployeeRepository,
    LinkRepository,
)
from doctrack.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@dataclass(frozen=True)
class Repositories:
    """All repositories bound to one session, plus that session's unit of work."""

    employees: EmployeeRepository
    document_types: DocumentTypeRepository
    links: LinkRepository
    documents: DocumentRepository
    unit_of_work: IUnitOfWork


@dataclass(frozen=True)
class DocumentationStack:
    """Resolvers, engine and the services built on them."""

    engine: ReconciliationEngine
    submission_resolver: SubmissionResolver
    documentation: EmployeeDocumentationService
    aggregator: DocumentAggregator


def build_repositories(db: AsyncSession) -> Repositories:
    return Repositories(
        employees=EmployeeRepository(db),
        document_types=DocumentTypeRepository(db),
        links=LinkRepository(db),
        documents=DocumentRepository(db),
        unit_of_work=SqlAlchemyUnitOfWork(db),
    )


def build_documentation_stack(repos: Repositories) -> DocumentationStack:
    """Wire link/submission resolvers into the reconciliation engine and its consumers."""
    settings = get_settings()
    link_resolver = LinkResolver(repos.links, repos.document_types)
    submission_resolver = SubmissionResolver(repos.documents)
    engine = ReconciliationEngine(repos.employees, link_resolver, submission_resolver)
    return DocumentationStack(
        engine=engine,
        submission_resolver=submission_resolver,
        documentation=EmployeeDocumentationService(
            repos.employees, repos.document_types, engine, submission_resolver
        ),
        aggregator=DocumentAggregator(
            repos.employees,
            repos.document_types,
            engine,
            submission_resolver,
            repos.unit_of_work,
            employee_scan_limit=settings.aggregation_employee_scan_limit,
            max_page_size=settings.max_page_size,
        ),
    )
