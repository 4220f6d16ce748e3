"""DocumentAggregator tests: company-wide pending/sent views grouped by employee."""

import pytest

from doctrack.api.v1.dependencies._composition import (
    Repositories,
    build_documentation_stack,
)
from doctrack.application.dtos.documentation import CompanyDocumentFilter
from doctrack.application.use_cases.documentation import DocumentAggregator
from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus
from doctrack.domain.exceptions import (
    InvalidIdFormatException,
    PaginationOutOfRangeException,
    ValidationException,
)
from doctrack.shared.utils.generators import generate_object_id
from tests.fakes import (
    AbortedTransactionError,
    FakeStore,
    cpf,
    seed_document_type,
    seed_employee,
    seed_link,
    seed_sent,
)


@pytest.fixture
def aggregator(repositories: Repositories) -> DocumentAggregator:
    return build_documentation_stack(repositories).aggregator


async def _employees_with_pending(store: FakeStore, count: int) -> str:
    """count employees each missing one RG; returns the RG type id."""
    rg = await seed_document_type(store, "RG")
    for i in range(count):
        employee = await seed_employee(store, f"Employee {count - i:02d}", cpf(i + 1))
        await seed_link(store, employee.id, rg.id)
    return rg.id


async def test_pending_paginates_groups(store: FakeStore, aggregator: DocumentAggregator) -> None:
    await _employees_with_pending(store, 23)

    pages = [
        await aggregator.pending_across_company(CompanyDocumentFilter(page=p, limit=10))
        for p in (1, 2, 3)
    ]

    assert [len(p.items) for p in pages] == [10, 10, 3]
    assert pages[0].pagination.total == 23
    assert pages[0].pagination.total_pages == 3
    assert pages[0].items[0].employee_name == "Employee 01"
    assert pages[2].items[-1].employee_name == "Employee 23"
    with pytest.raises(PaginationOutOfRangeException):
        await aggregator.pending_across_company(CompanyDocumentFilter(page=4, limit=10))


async def test_pending_groups_sorted_and_documents_sorted(
    store: FakeStore, aggregator: DocumentAggregator
) -> None:
    zoe = await seed_employee(store, "Zoe", cpf(1))
    ana = await seed_employee(store, "Ana", cpf(2))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    for employee in (zoe, ana):
        await seed_link(store, employee.id, rg.id)
        await seed_link(store, employee.id, cnh.id)
    await seed_sent(store, zoe.id, rg.id, "1")

    page = await aggregator.pending_across_company(CompanyDocumentFilter())

    assert [g.employee_name for g in page.items] == ["Ana", "Zoe"]
    assert [d.document_type.name for d in page.items[0].documents] == ["CNH", "RG"]
    assert [d.document_type.name for d in page.items[1].documents] == ["CNH"]
    assert all(d.status == DocumentStatus.PENDING for d in page.items[0].documents)
    assert page.items[0].employee_document == cpf(2)


async def test_employees_without_matches_are_left_out(
    store: FakeStore, aggregator: DocumentAggregator
) -> None:
    done = await seed_employee(store, "Done", cpf(1))
    await seed_employee(store, "Nothing Required", cpf(2))
    rg = await seed_document_type(store, "RG")
    await seed_link(store, done.id, rg.id)
    await seed_sent(store, done.id, rg.id, "1")

    page = await aggregator.pending_across_company(CompanyDocumentFilter())

    assert page.items == []
    assert page.pagination.total == 0


async def test_soft_deleted_employees_excluded(
    store: FakeStore, aggregator: DocumentAggregator
) -> None:
    rg_id = await _employees_with_pending(store, 2)
    first = next(iter(store.employees.rows.values()))
    await store.employees.set_active(first.id, False)

    page = await aggregator.pending_across_company(
        CompanyDocumentFilter(document_type_id=rg_id)
    )

    assert first.id not in [g.employee_id for g in page.items]
    assert len(page.items) == 1


async def test_type_filter(store: FakeStore, aggregator: DocumentAggregator) -> None:
    employee = await seed_employee(store, "Ana", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_link(store, employee.id, rg.id)
    await seed_link(store, employee.id, cnh.id)

    page = await aggregator.pending_across_company(
        CompanyDocumentFilter(document_type_id=cnh.id)
    )

    assert [d.document_type.id for d in page.items[0].documents] == [cnh.id]


async def test_unknown_type_filter_gives_empty_page(
    store: FakeStore, aggregator: DocumentAggregator
) -> None:
    await _employees_with_pending(store, 3)

    page = await aggregator.pending_across_company(
        CompanyDocumentFilter(document_type_id=generate_object_id())
    )

    assert page.items == []
    assert page.pagination.total == 0


async def test_malformed_type_filter(aggregator: DocumentAggregator) -> None:
    with pytest.raises(InvalidIdFormatException):
        await aggregator.sent_across_company(CompanyDocumentFilter(document_type_id="x"))


async def test_inactive_filter_on_pending_matches_nothing(
    store: FakeStore, aggregator: DocumentAggregator
) -> None:
    await _employees_with_pending(store, 2)

    page = await aggregator.pending_across_company(
        CompanyDocumentFilter(status=ActiveStatusFilter.INACTIVE)
    )

    assert page.items == []


async def test_limit_clamped_and_page_validated(
    store: FakeStore, aggregator: DocumentAggregator
) -> None:
    await _employees_with_pending(store, 2)

    page = await aggregator.pending_across_company(CompanyDocumentFilter(limit=500))
    assert page.pagination.limit == 100

    page = await aggregator.pending_across_company(CompanyDocumentFilter(limit=0))
    assert page.pagination.limit == 1

    with pytest.raises(ValidationException):
        await aggregator.pending_across_company(CompanyDocumentFilter(page=0))


async def test_sent_across_company(store: FakeStore, aggregator: DocumentAggregator) -> None:
    ana = await seed_employee(store, "Ana", cpf(1))
    bia = await seed_employee(store, "Bia", cpf(2))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_sent(store, ana.id, rg.id, "111")
    await seed_sent(store, ana.id, cnh.id, "222")
    await seed_link(store, bia.id, rg.id)

    page = await aggregator.sent_across_company(CompanyDocumentFilter())

    assert [g.employee_name for g in page.items] == ["Ana"]
    documents = page.items[0].documents
    assert [d.document_type.name for d in documents] == ["CNH", "RG"]
    assert [d.value for d in documents] == ["222", "111"]
    assert all(d.document_id for d in documents)


async def test_failing_employee_is_skipped(
    store: FakeStore, aggregator: DocumentAggregator, monkeypatch, caplog
) -> None:
    await _employees_with_pending(store, 3)
    broken = next(e for e in store.employees.rows.values() if e.name == "Employee 02")
    original = aggregator._engine.partition

    async def partition(employee_id: str):
        if employee_id == broken.id:
            raise RuntimeError("backend hiccup")
        return await original(employee_id)

    monkeypatch.setattr(aggregator._engine, "partition", partition)

    page = await aggregator.pending_across_company(CompanyDocumentFilter())

    assert [g.employee_name for g in page.items] == ["Employee 01", "Employee 03"]
    assert "Skipping employee" in caplog.text


async def test_database_failure_for_one_employee_spares_the_others(
    store: FakeStore, aggregator: DocumentAggregator, monkeypatch
) -> None:
    await _employees_with_pending(store, 3)
    broken = next(e for e in store.employees.rows.values() if e.name == "Employee 02")
    transaction = store.unit_of_work
    list_by_employee = store.links.list_by_employee

    async def timing_out_list_by_employee(employee_id, *args, **kwargs):
        transaction.ensure_usable()
        if employee_id == broken.id:
            transaction.mark_failed()
            raise AbortedTransactionError("canceling statement due to statement timeout")
        return await list_by_employee(employee_id, *args, **kwargs)

    monkeypatch.setattr(store.links, "list_by_employee", timing_out_list_by_employee)

    page = await aggregator.pending_across_company(CompanyDocumentFilter())

    assert [g.employee_name for g in page.items] == ["Employee 01", "Employee 03"]
    assert transaction.rolled_back == 1
    assert transaction.failed is False
