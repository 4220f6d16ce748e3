"""Repository integration tests. Require Postgres; session is rolled back after each test."""

import uuid

import pytest
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError

from doctrack.application.use_cases.documentation import (
    LinkResolver,
    ReconciliationEngine,
    SubmissionResolver,
)
from doctrack.application.use_cases.employees import DocumentRequirementCoordinator
from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus
from doctrack.infrastructure.persistence.repositories import (
    DocumentRepository,
    DocumentTypeRepository,
    EmployeeRepository,
    LinkRepository,
)
from doctrack.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from doctrack.shared.utils.datetime import utc_now


def _unique_document() -> str:
    digits = f"{uuid.uuid4().int % 10**11:011d}"
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


@pytest.mark.requires_db
async def test_employee_create_and_lookup(db_session) -> None:
    repo = EmployeeRepository(db_session)
    document = _unique_document()
    created = await repo.create_employee("Repo Test Employee", document, utc_now())

    assert created.id
    assert created.is_active
    assert (await repo.get_by_document(document)).id == created.id

    deleted = await repo.set_active(created.id, False)
    assert deleted.deleted_at is not None
    assert await repo.get_by_id(created.id) is None
    assert await repo.get_by_id(created.id, include_inactive=True) is not None


@pytest.mark.requires_db
async def test_search_matches_raw_cpf_digits(db_session) -> None:
    repo = EmployeeRepository(db_session)
    document = _unique_document()
    created = await repo.create_employee("Search Target", document, utc_now())
    digits = document.replace(".", "").replace("-", "")
    pattern = "^{}\\.{}\\.{}-{}$".format(digits[:3], digits[3:6], digits[6:9], digits[9:])

    found = await repo.search(digits, pattern, ActiveStatusFilter.ALL)

    assert created.id in [e.id for e in found]


@pytest.mark.requires_db
async def test_document_type_name_lookup_case_insensitive(db_session) -> None:
    repo = DocumentTypeRepository(db_session)
    name = f"TYPE-{uuid.uuid4().hex[:8]}".upper()
    created = await repo.create_document_type(name, None, False)

    found = await repo.get_by_name(name.lower())

    assert found is not None
    assert found.id == created.id


@pytest.mark.requires_db
async def test_coordinator_round_trip(db_session) -> None:
    employees = EmployeeRepository(db_session)
    document_types = DocumentTypeRepository(db_session)
    links = LinkRepository(db_session)
    documents = DocumentRepository(db_session)
    coordinator = DocumentRequirementCoordinator(employees, document_types, links, documents)
    engine = ReconciliationEngine(
        employees, LinkResolver(links, document_types), SubmissionResolver(documents)
    )
    employee = await employees.create_employee("Round Trip", _unique_document(), utc_now())
    doc_type = await document_types.create_document_type(
        f"RT-{uuid.uuid4().hex[:8]}".upper(), None, False
    )

    await coordinator.link_document_types(employee.id, [doc_type.id])
    assert [t.id for t in (await engine.reconcile(employee.id)).pending] == [doc_type.id]

    first = await coordinator.send_document(employee.id, doc_type.id, "A-1")
    second = await coordinator.send_document(employee.id, doc_type.id, "B-2")
    assert second.id == first.id
    assert second.value == "B2"
    assert second.status == DocumentStatus.SENT

    result = await engine.reconcile(employee.id)
    assert result.pending == []
    assert [s.value for s in result.sent] == ["B2"]

    assert await coordinator.unlink_document_types(employee.id, [doc_type.id]) == [doc_type.id]
    assert (await engine.reconcile(employee.id)).sent == []
    assert await documents.get_active_for_pair(employee.id, doc_type.id) is not None


@pytest.mark.requires_db
async def test_failed_savepoint_leaves_session_usable(db_session) -> None:
    unit_of_work = SqlAlchemyUnitOfWork(db_session)
    repo = EmployeeRepository(db_session)
    document = _unique_document()
    await repo.create_employee("Savepoint Employee", document, utc_now())

    with pytest.raises(DBAPIError):
        async with unit_of_work.savepoint():
            await db_session.execute(text("SELECT 1 / 0"))

    assert (await repo.get_by_document(document)).name == "Savepoint Employee"
