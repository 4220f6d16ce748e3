"""DocumentTypeService tests: naming rules, soft delete, restore and linked employees."""

import pytest

from doctrack.application.dtos.document_type import DocumentTypeListFilter
from doctrack.application.use_cases.document_types import DocumentTypeService
from doctrack.domain.enums import ActiveStatusFilter
from doctrack.domain.exceptions import (
    DocumentTypeNotFoundException,
    DuplicateDocumentTypeException,
)
from doctrack.shared.utils.generators import generate_object_id
from tests.fakes import FakeStore, cpf, seed_employee, seed_link


@pytest.fixture
def service(store: FakeStore) -> DocumentTypeService:
    return DocumentTypeService(
        document_type_repo=store.document_types,
        link_repo=store.links,
        employee_repo=store.employees,
    )


async def test_create_uppercases_and_sanitizes(service: DocumentTypeService) -> None:
    created = await service.create_document_type(
        " cnh ", description="<i>Driver</i> license", is_identity=False
    )
    assert created.name == "CNH"
    assert created.description == "Driver license"
    assert created.is_active


async def test_duplicate_name_case_insensitive(service: DocumentTypeService) -> None:
    await service.create_document_type("RG")
    with pytest.raises(DuplicateDocumentTypeException):
        await service.create_document_type("rg")


async def test_rename_to_taken_name(service: DocumentTypeService) -> None:
    await service.create_document_type("RG")
    cnh = await service.create_document_type("CNH")
    with pytest.raises(DuplicateDocumentTypeException):
        await service.update_document_type(cnh.id, name="Rg")


async def test_update_fields(service: DocumentTypeService) -> None:
    rg = await service.create_document_type("RG")
    updated = await service.update_document_type(
        rg.id, name="rg", description="State id", is_identity=True
    )
    assert updated.name == "RG"
    assert updated.description == "State id"
    assert updated.is_identity


async def test_delete_and_restore(service: DocumentTypeService) -> None:
    rg = await service.create_document_type("RG")

    deleted = await service.delete_document_type(rg.id)
    assert not deleted.is_active
    with pytest.raises(DocumentTypeNotFoundException):
        await service.get_document_type(rg.id)

    restored = await service.restore_document_type(rg.id)
    assert restored.is_active
    assert restored.deleted_at is None


async def test_list_by_status(service: DocumentTypeService) -> None:
    await service.create_document_type("RG")
    cnh = await service.create_document_type("CNH")
    await service.delete_document_type(cnh.id)

    active = await service.list_document_types(
        DocumentTypeListFilter(status=ActiveStatusFilter.ACTIVE)
    )
    everything = await service.list_document_types(DocumentTypeListFilter())

    assert [t.name for t in active.items] == ["RG"]
    assert [t.name for t in everything.items] == ["CNH", "RG"]


async def test_linked_employees(store: FakeStore, service: DocumentTypeService) -> None:
    rg = await service.create_document_type("RG")
    bia = await seed_employee(store, "Bia", cpf(1))
    ana = await seed_employee(store, "Ana", cpf(2))
    gone = await seed_employee(store, "Carlos", cpf(3))
    unlinked = await seed_employee(store, "Duda", cpf(4))
    for employee in (bia, ana, gone, unlinked):
        link = await seed_link(store, employee.id, rg.id)
        if employee is unlinked:
            await store.links.set_active(link.id, False)
    await store.employees.set_active(gone.id, False)

    page = await service.get_linked_employees(rg.id)

    assert [e.name for e in page.items] == ["Ana", "Bia"]
    assert page.pagination.total == 2


async def test_linked_employees_unknown_type(service: DocumentTypeService) -> None:
    page = await service.get_linked_employees(generate_object_id())
    assert page.items == []
    assert page.pagination.total == 0
