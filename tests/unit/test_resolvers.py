"""Link and submission resolver tests over in-memory repositories."""

from doctrack.application.use_cases.documentation import LinkResolver, SubmissionResolver
from doctrack.domain.enums import DocumentStatus
from tests.fakes import (
    FakeStore,
    cpf,
    seed_document_type,
    seed_employee,
    seed_link,
    seed_sent,
)


async def test_active_links_oldest_first(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_link(store, employee.id, cnh.id)
    await seed_link(store, employee.id, rg.id)

    resolver = LinkResolver(store.links, store.document_types)
    types = await resolver.active_required_types(employee.id)

    assert [t.name for t in types] == ["CNH", "RG"]


async def test_inactive_links_and_deleted_types_skipped(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    ctps = await seed_document_type(store, "CTPS")
    link = await seed_link(store, employee.id, rg.id)
    await seed_link(store, employee.id, cnh.id)
    await seed_link(store, employee.id, ctps.id)
    await store.links.set_active(link.id, False)
    await store.document_types.set_active(cnh.id, False)

    resolver = LinkResolver(store.links, store.document_types)
    links = await resolver.active_links(employee.id)

    assert [r.document_type.id for r in links] == [ctps.id]
    assert links[0].link.active


async def test_no_links(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    resolver = LinkResolver(store.links, store.document_types)
    assert await resolver.active_links(employee.id) == []


async def test_sent_documents_keyed_by_type(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_sent(store, employee.id, rg.id, "123456789")
    await store.documents.create_document(employee.id, cnh.id, "", DocumentStatus.PENDING)

    sent = await SubmissionResolver(store.documents).sent_documents(employee.id)

    assert set(sent) == {rg.id}
    assert sent[rg.id].value == "123456789"


async def test_sent_documents_type_filter(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    cnh = await seed_document_type(store, "CNH")
    await seed_sent(store, employee.id, rg.id, "1")
    await seed_sent(store, employee.id, cnh.id, "2")

    resolver = SubmissionResolver(store.documents)

    assert set(await resolver.sent_documents(employee.id, [cnh.id])) == {cnh.id}
    assert await resolver.sent_documents(employee.id, []) == {}


async def test_first_document_wins(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    first = await seed_sent(store, employee.id, rg.id, "111")
    await seed_sent(store, employee.id, rg.id, "222")

    sent = await SubmissionResolver(store.documents).sent_documents(employee.id)

    assert sent[rg.id].id == first.id


async def test_soft_deleted_documents_ignored(store: FakeStore) -> None:
    employee = await seed_employee(store, "Ana Lima", cpf(1))
    rg = await seed_document_type(store, "RG")
    document = await seed_sent(store, employee.id, rg.id, "111")
    await store.documents.set_active(document.id, False)

    assert await SubmissionResolver(store.documents).sent_documents(employee.id) == {}
