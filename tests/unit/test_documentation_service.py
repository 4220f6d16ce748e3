"""Per-employee documentation views: sent, pending, overview and summaries."""

import pytest

from doctrack.api.v1.dependencies._composition import (
    Repositories,
    build_documentation_stack,
)
from doctrack.application.use_cases.documentation import EmployeeDocumentationService
from doctrack.application.use_cases.documentation.documentation_service import build_summary
from doctrack.domain.enums import DocumentStatus
from doctrack.domain.exceptions import EmployeeNotFoundException, InvalidIdFormatException
from doctrack.shared.utils.generators import generate_object_id
from tests.fakes import (
    FakeStore,
    cpf,
    seed_document_type,
    seed_employee,
    seed_link,
    seed_sent,
)


@pytest.fixture
def documentation(repositories: Repositories) -> EmployeeDocumentationService:
    return build_documentation_stack(repositories).documentation


class TestBuildSummary:
    def test_rounds_half_up(self) -> None:
        assert build_summary(required=8, sent=1).completion_percentage == 13
        assert build_summary(required=3, sent=2).completion_percentage == 67

    def test_nothing_required(self) -> None:
        summary = build_summary(required=0, sent=0)
        assert summary.completion_percentage == 0
        assert not summary.has_required_documents
        assert not summary.is_complete

    def test_complete(self) -> None:
        summary = build_summary(required=2, sent=2)
        assert summary.is_complete
        assert summary.pending == 0
        assert summary.completion_percentage == 100


async def test_overview_counts_and_lists(
    store: FakeStore, documentation: EmployeeDocumentationService
) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_link(store, employee.id, rg.id)
    await seed_link(store, employee.id, cnh.id)
    sent = await seed_sent(store, employee.id, rg.id, "123456789")

    overview = await documentation.get_documentation_overview(employee.id)

    assert overview.total == 2
    assert overview.sent == 1
    assert overview.pending == 1
    assert not overview.is_complete
    assert overview.last_updated == sent.updated_at
    assert [d.document_type.name for d in overview.sent_documents] == ["RG"]
    assert [p.document_type.name for p in overview.pending_documents] == ["CNH"]
    assert overview.pending_documents[0].status == DocumentStatus.PENDING
    assert overview.pending_documents[0].value is None


async def test_overview_without_links(
    store: FakeStore, documentation: EmployeeDocumentationService
) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    overview = await documentation.get_documentation_overview(employee.id)
    assert overview.total == 0
    assert not overview.is_complete
    assert overview.last_updated is None


async def test_sent_documents_include_unlinked_and_format(
    store: FakeStore, documentation: EmployeeDocumentationService
) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    doc_cpf = await seed_document_type(store, "CPF")
    await seed_sent(store, employee.id, doc_cpf.id, "12345678901")

    items = await documentation.get_sent_documents(employee.id)

    assert len(items) == 1
    assert items[0].formatted_value == "123.456.789-01"


async def test_sent_document_with_missing_type_gets_placeholder(
    store: FakeStore, documentation: EmployeeDocumentationService
) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    orphan_type_id = generate_object_id()
    await seed_sent(store, employee.id, orphan_type_id, "X1")

    items = await documentation.get_sent_documents(employee.id)

    assert items[0].document_type.name == "Unknown document type"
    assert items[0].document_type.id == orphan_type_id


async def test_pending_documents(
    store: FakeStore, documentation: EmployeeDocumentationService
) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    link = await seed_link(store, employee.id, rg.id)

    pending = await documentation.get_pending_documents(employee.id)

    assert [p.document_type.id for p in pending] == [rg.id]
    assert pending[0].required_since == link.created_at
    assert pending[0].is_active


async def test_summary_counts_required_only(
    store: FakeStore, documentation: EmployeeDocumentationService
) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_link(store, employee.id, rg.id)
    await seed_sent(store, employee.id, rg.id, "1")
    await seed_sent(store, employee.id, cnh.id, "2")

    [enriched] = await documentation.enrich([employee])

    assert enriched.summary.required == 1
    assert enriched.summary.sent == 1
    assert enriched.summary.is_complete


async def test_unknown_employee(documentation: EmployeeDocumentationService) -> None:
    with pytest.raises(EmployeeNotFoundException):
        await documentation.get_pending_documents(generate_object_id())
    with pytest.raises(InvalidIdFormatException):
        await documentation.get_sent_documents("not-an-id")
