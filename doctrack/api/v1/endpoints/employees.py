"""Employee API: CRUD, required-document links, submissions and documentation views.

Routes stay thin: parse the request, call one service method, wrap the
result in ApiResponse. Domain exceptions are turned into the error
envelope by the registered exception handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from doctrack.api.v1.dependencies import (
    get_documentation_service,
    get_employee_service,
    get_employee_service_for_write,
    get_reconciliation_engine,
    get_requirement_coordinator,
)
from doctrack.application.dtos.documentation import EmployeeWithSummary
from doctrack.application.dtos.employee import (
    EmployeeCreate,
    EmployeeListFilter,
    EmployeeUpdate,
    RequiredDocumentInput,
)
from doctrack.application.services.validation import (
    parse_status_filter,
    validate_object_id,
)
from doctrack.application.use_cases.documentation import (
    EmployeeDocumentationService,
    ReconciliationEngine,
)
from doctrack.application.use_cases.employees import (
    DocumentRequirementCoordinator,
    EmployeeService,
)
from doctrack.core.limiter import limit_writes
from doctrack.domain.enums import ActiveStatusFilter
from doctrack.schemas.common import ApiResponse, pagination_of
from doctrack.schemas.document import DocumentResponse, SendDocumentRequest
from doctrack.schemas.documentation import (
    DocumentationOverviewResponse,
    PendingDocumentResponse,
    ReconciliationResponse,
    RequiredDocumentResponse,
    SentDocumentResponse,
    UnlinkResponse,
)
from doctrack.schemas.employee import (
    DocumentationSummaryResponse,
    DocumentTypeIdsRequest,
    EmployeeCreateRequest,
    EmployeeResponse,
    EmployeeSearchItem,
    EmployeeUpdateRequest,
)

router = APIRouter()


def _search_item(item: EmployeeWithSummary) -> EmployeeSearchItem:
    return EmployeeSearchItem(
        **EmployeeResponse.model_validate(item.employee).model_dump(),
        documentation_summary=DocumentationSummaryResponse.model_validate(item.summary),
    )


@router.post("", response_model=ApiResponse[EmployeeResponse], status_code=201)
@limit_writes
async def create_employee(
    request: Request,
    body: EmployeeCreateRequest,
    coordinator: Annotated[
        DocumentRequirementCoordinator, Depends(get_requirement_coordinator)
    ],
):
    """Create an employee, optionally with its required documents."""
    created = await coordinator.create_employee(
        EmployeeCreate(
            name=body.name,
            document=body.document,
            hired_at=body.hired_at,
            required_documents=[
                RequiredDocumentInput(document_type_id=d.document_type_id, value=d.value)
                for d in body.required_documents
            ],
        )
    )
    return ApiResponse(
        message="Employee created",
        data=EmployeeResponse.model_validate(created),
    )


@router.get("", response_model=ApiResponse[list[EmployeeResponse]])
async def list_employees(
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    status: str | None = Query(None, description="active, inactive or all"),
    name: str | None = Query(None, description="Case-insensitive name filter"),
    page: int = Query(1),
    limit: int | None = Query(None),
):
    """List employees ordered by name."""
    result = await service.list_employees(
        EmployeeListFilter(status=parse_status_filter(status), name=name),
        page=page,
        limit=limit,
    )
    return ApiResponse(
        data=[EmployeeResponse.model_validate(e) for e in result.items],
        pagination=pagination_of(result.pagination),
    )


@router.get("/search", response_model=ApiResponse[list[EmployeeSearchItem]])
async def search_employees(
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    q: str = Query("", description="Name fragment or CPF (formatted or digits)"),
    status: str | None = Query(None),
    page: int = Query(1),
    limit: int | None = Query(None),
):
    """Search employees by name or document, with a documentation summary each."""
    result = await service.search_employees(
        q,
        status=parse_status_filter(status),
        page=page,
        limit=limit,
    )
    return ApiResponse(
        data=[_search_item(item) for item in result.items],
        pagination=pagination_of(result.pagination),
    )


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeResponse])
async def get_employee(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
):
    employee = await service.get_employee(employee_id)
    return ApiResponse(data=EmployeeResponse.model_validate(employee))


@router.put("/{employee_id}", response_model=ApiResponse[EmployeeResponse])
@limit_writes
async def update_employee(
    request: Request,
    employee_id: str,
    body: EmployeeUpdateRequest,
    service: Annotated[EmployeeService, Depends(get_employee_service_for_write)],
):
    """Update employee fields; omitted fields are unchanged."""
    updated = await service.update_employee(
        employee_id,
        EmployeeUpdate(name=body.name, document=body.document, hired_at=body.hired_at),
    )
    return ApiResponse(
        message="Employee updated", data=EmployeeResponse.model_validate(updated)
    )


@router.delete("/{employee_id}", response_model=ApiResponse[EmployeeResponse])
@limit_writes
async def delete_employee(
    request: Request,
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service_for_write)],
):
    """Soft delete an employee."""
    deleted = await service.delete_employee(employee_id)
    return ApiResponse(
        message="Employee deleted", data=EmployeeResponse.model_validate(deleted)
    )


@router.patch("/{employee_id}/restore", response_model=ApiResponse[EmployeeResponse])
@limit_writes
async def restore_employee(
    request: Request,
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service_for_write)],
):
    restored = await service.restore_employee(employee_id)
    return ApiResponse(
        message="Employee restored", data=EmployeeResponse.model_validate(restored)
    )


@router.post(
    "/{employee_id}/required-documents",
    response_model=ApiResponse[list[RequiredDocumentResponse]],
    status_code=201,
)
@limit_writes
async def link_document_types(
    request: Request,
    employee_id: str,
    body: DocumentTypeIdsRequest,
    coordinator: Annotated[
        DocumentRequirementCoordinator, Depends(get_requirement_coordinator)
    ],
):
    """Require document types from the employee (all-or-nothing)."""
    linked = await coordinator.link_document_types(employee_id, body.document_type_ids)
    return ApiResponse(
        message="Document types linked",
        data=[RequiredDocumentResponse.model_validate(r) for r in linked],
    )


@router.get(
    "/{employee_id}/required-documents",
    response_model=ApiResponse[list[RequiredDocumentResponse]],
)
async def get_required_documents(
    employee_id: str,
    service: Annotated[EmployeeService, Depends(get_employee_service)],
    status: str | None = Query(None, description="Link state: active, inactive or all"),
):
    """Links of the employee with their document types (default: active links)."""
    links = await service.get_required_documents(
        employee_id, parse_status_filter(status, ActiveStatusFilter.ACTIVE)
    )
    return ApiResponse(data=[RequiredDocumentResponse.model_validate(r) for r in links])


@router.delete(
    "/{employee_id}/required-documents",
    response_model=ApiResponse[UnlinkResponse],
)
@limit_writes
async def unlink_document_types(
    request: Request,
    employee_id: str,
    body: DocumentTypeIdsRequest,
    coordinator: Annotated[
        DocumentRequirementCoordinator, Depends(get_requirement_coordinator)
    ],
):
    """Stop requiring several document types at once. Types not linked are skipped."""
    unlinked = await coordinator.unlink_document_types(employee_id, body.document_type_ids)
    return ApiResponse(
        message=f"{len(unlinked)} document type(s) unlinked",
        data=UnlinkResponse(unlinked_document_type_ids=unlinked),
    )


@router.delete(
    "/{employee_id}/required-documents/{document_type_id}",
    response_model=ApiResponse[UnlinkResponse],
)
@limit_writes
async def unlink_document_type(
    request: Request,
    employee_id: str,
    document_type_id: str,
    coordinator: Annotated[
        DocumentRequirementCoordinator, Depends(get_requirement_coordinator)
    ],
):
    """Stop requiring a document type. Idempotent; documents are kept."""
    unlinked = await coordinator.unlink_document_types(employee_id, [document_type_id])
    return ApiResponse(
        message="Document type unlinked" if unlinked else "Document type was not linked",
        data=UnlinkResponse(unlinked_document_type_ids=unlinked),
    )


@router.patch(
    "/{employee_id}/required-documents/{document_type_id}/restore",
    response_model=ApiResponse[RequiredDocumentResponse],
)
@limit_writes
async def restore_document_type_link(
    request: Request,
    employee_id: str,
    document_type_id: str,
    coordinator: Annotated[
        DocumentRequirementCoordinator, Depends(get_requirement_coordinator)
    ],
):
    restored = await coordinator.restore_document_type_link(
        employee_id, document_type_id
    )
    return ApiResponse(
        message="Document type link restored",
        data=RequiredDocumentResponse.model_validate(restored),
    )


@router.post(
    "/{employee_id}/documents/{document_type_id}",
    response_model=ApiResponse[DocumentResponse],
)
@limit_writes
async def send_document(
    request: Request,
    employee_id: str,
    document_type_id: str,
    body: SendDocumentRequest,
    coordinator: Annotated[
        DocumentRequirementCoordinator, Depends(get_requirement_coordinator)
    ],
):
    """Submit the value of a required document; replaces an earlier submission."""
    document = await coordinator.send_document(employee_id, document_type_id, body.value)
    return ApiResponse(
        message="Document sent", data=DocumentResponse.model_validate(document)
    )


@router.get(
    "/{employee_id}/documents/sent",
    response_model=ApiResponse[list[SentDocumentResponse]],
)
async def get_sent_documents(
    employee_id: str,
    documentation: Annotated[
        EmployeeDocumentationService, Depends(get_documentation_service)
    ],
):
    items = await documentation.get_sent_documents(employee_id)
    return ApiResponse(data=[SentDocumentResponse.model_validate(i) for i in items])


@router.get(
    "/{employee_id}/documents/pending",
    response_model=ApiResponse[list[PendingDocumentResponse]],
)
async def get_pending_documents(
    employee_id: str,
    documentation: Annotated[
        EmployeeDocumentationService, Depends(get_documentation_service)
    ],
):
    items = await documentation.get_pending_documents(employee_id)
    return ApiResponse(data=[PendingDocumentResponse.model_validate(i) for i in items])


@router.get(
    "/{employee_id}/documentation",
    response_model=ApiResponse[DocumentationOverviewResponse],
)
async def get_documentation_overview(
    employee_id: str,
    documentation: Annotated[
        EmployeeDocumentationService, Depends(get_documentation_service)
    ],
):
    """Totals plus sent and pending lists for the employee."""
    overview = await documentation.get_documentation_overview(employee_id)
    return ApiResponse(data=DocumentationOverviewResponse.model_validate(overview))


@router.get(
    "/{employee_id}/documentation/status",
    response_model=ApiResponse[ReconciliationResponse],
)
async def get_documentation_status(
    employee_id: str,
    engine: Annotated[ReconciliationEngine, Depends(get_reconciliation_engine)],
):
    """Required document types split into sent and pending."""
    result = await engine.reconcile(validate_object_id(employee_id, "employee_id"))
    return ApiResponse(data=ReconciliationResponse.model_validate(result))
