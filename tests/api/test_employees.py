"""Employee and documentation endpoints over in-memory repositories."""

from httpx import AsyncClient

from doctrack.shared.utils.generators import generate_object_id
from tests.fakes import FakeStore, cpf, seed_document_type

BASE = "/api/v1"


async def _create_type(client: AsyncClient, name: str) -> str:
    response = await client.post(f"{BASE}/document-types", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()["data"]["id"]


async def _create_employee(client: AsyncClient, name: str, document: str, **extra) -> dict:
    response = await client.post(
        f"{BASE}/employees", json={"name": name, "document": document, **extra}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_and_get_employee(fake_client: AsyncClient) -> None:
    created = await _create_employee(fake_client, "Ana Lima", "123.456.789-01")

    response = await fake_client.get(f"{BASE}/employees/{created['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["document"] == "123.456.789-01"
    assert body["data"]["is_active"] is True


async def test_invalid_id_is_400(fake_client: AsyncClient) -> None:
    response = await fake_client.get(f"{BASE}/employees/not-an-id")
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INVALID_ID_FORMAT"
    assert body["error"]["method"] == "GET"


async def test_unknown_employee_is_404(fake_client: AsyncClient) -> None:
    response = await fake_client.get(f"{BASE}/employees/{generate_object_id()}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "EMPLOYEE_NOT_FOUND"


async def test_duplicate_employee_is_409(fake_client: AsyncClient) -> None:
    await _create_employee(fake_client, "Ana Lima", cpf(1))
    response = await fake_client.post(
        f"{BASE}/employees", json={"name": "Ana Clone", "document": cpf(1)}
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "DUPLICATE_EMPLOYEE"


async def test_bad_document_format_is_400(fake_client: AsyncClient) -> None:
    response = await fake_client.post(
        f"{BASE}/employees", json={"name": "Ana Lima", "document": "12345678901"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"field": "document"}


async def test_missing_body_field_is_422(fake_client: AsyncClient) -> None:
    response = await fake_client.post(f"{BASE}/employees", json={"name": "Ana Lima"})
    assert response.status_code == 422
    assert response.json()["error"]["type"] == "RequestValidationError"


async def test_link_send_and_overview(fake_client: AsyncClient) -> None:
    rg_id = await _create_type(fake_client, "rg")
    cnh_id = await _create_type(fake_client, "cnh")
    employee = await _create_employee(fake_client, "Ana Lima", cpf(1))
    employee_url = f"{BASE}/employees/{employee['id']}"

    linked = await fake_client.post(
        f"{employee_url}/required-documents",
        json={"document_type_ids": [rg_id, cnh_id]},
    )
    assert linked.status_code == 201
    assert {r["document_type"]["name"] for r in linked.json()["data"]} == {"RG", "CNH"}

    sent = await fake_client.post(
        f"{employee_url}/documents/{rg_id}", json={"value": "12.345.678-9"}
    )
    assert sent.status_code == 200
    assert sent.json()["data"]["value"] == "123456789"
    assert sent.json()["data"]["status"] == "SENT"

    overview = (await fake_client.get(f"{employee_url}/documentation")).json()["data"]
    assert overview["total"] == 2
    assert overview["sent"] == 1
    assert overview["pending"] == 1
    assert overview["is_complete"] is False
    assert overview["sent_documents"][0]["formatted_value"] == "12.345.678-9"
    assert overview["pending_documents"][0]["document_type"]["name"] == "CNH"

    status = (await fake_client.get(f"{employee_url}/documentation/status")).json()["data"]
    assert [s["document_type"]["id"] for s in status["sent"]] == [rg_id]
    assert [p["id"] for p in status["pending"]] == [cnh_id]

    pending = (await fake_client.get(f"{employee_url}/documents/pending")).json()["data"]
    assert [p["document_type"]["id"] for p in pending] == [cnh_id]
    sent_list = (await fake_client.get(f"{employee_url}/documents/sent")).json()["data"]
    assert [s["document_type"]["id"] for s in sent_list] == [rg_id]


async def test_unlink_and_restore_link(fake_client: AsyncClient) -> None:
    rg_id = await _create_type(fake_client, "RG")
    employee = await _create_employee(fake_client, "Ana Lima", cpf(1))
    employee_url = f"{BASE}/employees/{employee['id']}"
    await fake_client.post(
        f"{employee_url}/required-documents", json={"document_type_ids": [rg_id]}
    )

    first = await fake_client.delete(f"{employee_url}/required-documents/{rg_id}")
    second = await fake_client.delete(f"{employee_url}/required-documents/{rg_id}")
    assert first.json()["data"]["unlinked_document_type_ids"] == [rg_id]
    assert second.status_code == 200
    assert second.json()["data"]["unlinked_document_type_ids"] == []

    inactive = await fake_client.get(
        f"{employee_url}/required-documents", params={"status": "inactive"}
    )
    assert [r["link"]["active"] for r in inactive.json()["data"]] == [False]

    restored = await fake_client.patch(
        f"{employee_url}/required-documents/{rg_id}/restore"
    )
    assert restored.status_code == 200
    assert restored.json()["data"]["link"]["active"] is True



async def test_unlink_several_types(fake_client: AsyncClient) -> None:
    rg_id = await _create_type(fake_client, "RG")
    cnh_id = await _create_type(fake_client, "CNH")
    never_linked = await _create_type(fake_client, "CTPS")
    employee = await _create_employee(fake_client, "Ana Lima", cpf(1))
    url = f"{BASE}/employees/{employee['id']}/required-documents"
    await fake_client.post(url, json={"document_type_ids": [rg_id, cnh_id]})

    response = await fake_client.request(
        "DELETE", url, json={"document_type_ids": [rg_id, cnh_id, never_linked]}
    )

    assert response.status_code == 200
    assert response.json()["data"]["unlinked_document_type_ids"] == [rg_id, cnh_id]
    assert (await fake_client.get(url)).json()["data"] == []

    malformed = await fake_client.request(
        "DELETE", url, json={"document_type_ids": ["nope"]}
    )
    assert malformed.status_code == 400
    assert malformed.json()["error"]["code"] == "INVALID_ID_FORMAT"


async def test_send_without_link_is_400(fake_client: AsyncClient) -> None:
    rg_id = await _create_type(fake_client, "RG")
    employee = await _create_employee(fake_client, "Ana Lima", cpf(1))
    response = await fake_client.post(
        f"{BASE}/employees/{employee['id']}/documents/{rg_id}", json={"value": "1"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_create_with_identity_document(
    fake_client: AsyncClient, store: FakeStore
) -> None:
    identity = await seed_document_type(store, "CPF")
    employee = await _create_employee(
        fake_client,
        "Ana Lima",
        "123.456.789-01",
        required_documents=[{"document_type_id": identity.id}],
    )

    overview = (
        await fake_client.get(f"{BASE}/employees/{employee['id']}/documentation")
    ).json()["data"]

    assert overview["is_complete"] is True
    sent = overview["sent_documents"][0]
    assert sent["value"] == "12345678901"
    assert sent["formatted_value"] == "123.456.789-01"


async def test_list_search_and_pagination(fake_client: AsyncClient) -> None:
    for i, name in enumerate(["Carla Dias", "Ana Lima", "Bruno Souza"], start=1):
        await _create_employee(fake_client, name, cpf(i))

    listing = await fake_client.get(f"{BASE}/employees", params={"limit": 2})
    body = listing.json()
    assert [e["name"] for e in body["data"]] == ["Ana Lima", "Bruno Souza"]
    assert body["pagination"] == {
        "page": 1,
        "limit": 2,
        "total": 3,
        "total_pages": 2,
        "has_next_page": True,
        "has_previous_page": False,
    }

    out_of_range = await fake_client.get(f"{BASE}/employees", params={"page": 5})
    assert out_of_range.status_code == 400
    assert out_of_range.json()["error"]["code"] == "PAGINATION_OUT_OF_RANGE"

    digits = cpf(2).replace(".", "").replace("-", "")
    search = await fake_client.get(f"{BASE}/employees/search", params={"q": digits})
    assert [e["name"] for e in search.json()["data"]] == ["Ana Lima"]
    assert search.json()["data"][0]["documentation_summary"]["required"] == 0


async def test_update_delete_restore(fake_client: AsyncClient) -> None:
    employee = await _create_employee(fake_client, "Ana Lima", cpf(1))
    url = f"{BASE}/employees/{employee['id']}"

    updated = await fake_client.put(url, json={"name": "Ana Maria"})
    assert updated.json()["data"]["name"] == "Ana Maria"

    deleted = await fake_client.delete(url)
    assert deleted.json()["data"]["is_active"] is False
    assert (await fake_client.get(url)).status_code == 404

    restored = await fake_client.patch(f"{url}/restore")
    assert restored.json()["data"]["is_active"] is True
    assert (await fake_client.get(url)).status_code == 200


async def test_page_size_is_clamped(fake_client: AsyncClient) -> None:
    await _create_employee(fake_client, "Ana Lima", cpf(1))

    listing = await fake_client.get(f"{BASE}/employees", params={"limit": 500})
    assert listing.json()["pagination"]["limit"] == 100

    search = await fake_client.get(
        f"{BASE}/employees/search", params={"q": "ana", "limit": 100000}
    )
    assert search.json()["pagination"]["limit"] == 100

    smallest = await fake_client.get(f"{BASE}/employees", params={"limit": 0})
    assert smallest.json()["pagination"]["limit"] == 1

    default = await fake_client.get(f"{BASE}/employees")
    assert default.json()["pagination"]["limit"] == 20
