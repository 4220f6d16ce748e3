"""Document type API: thin routes delegating to DocumentTypeService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from doctrack.api.v1.dependencies import (
    get_document_type_service,
    get_document_type_service_for_write,
)
from doctrack.application.dtos.document_type import DocumentTypeListFilter
from doctrack.application.services.validation import parse_status_filter
from doctrack.application.use_cases.document_types import DocumentTypeService
from doctrack.core.limiter import limit_writes
from doctrack.schemas.common import ApiResponse, pagination_of
from doctrack.schemas.document_type import (
    DocumentTypeCreateRequest,
    DocumentTypeResponse,
    DocumentTypeUpdateRequest,
)
from doctrack.schemas.employee import EmployeeResponse

router = APIRouter()


@router.post("", response_model=ApiResponse[DocumentTypeResponse], status_code=201)
@limit_writes
async def create_document_type(
    request: Request,
    body: DocumentTypeCreateRequest,
    service: Annotated[
        DocumentTypeService, Depends(get_document_type_service_for_write)
    ],
):
    """Create a document type. Name is stored uppercase and must be unique."""
    created = await service.create_document_type(
        body.name, description=body.description, is_identity=body.is_identity
    )
    return ApiResponse(
        message="Document type created",
        data=DocumentTypeResponse.model_validate(created),
    )


@router.get("", response_model=ApiResponse[list[DocumentTypeResponse]])
async def list_document_types(
    service: Annotated[DocumentTypeService, Depends(get_document_type_service)],
    status: str | None = Query(None, description="active, inactive or all"),
    name: str | None = Query(None),
    page: int = Query(1),
    limit: int = Query(10),
):
    result = await service.list_document_types(
        DocumentTypeListFilter(status=parse_status_filter(status), name=name),
        page=page,
        limit=limit,
    )
    return ApiResponse(
        data=[DocumentTypeResponse.model_validate(t) for t in result.items],
        pagination=pagination_of(result.pagination),
    )


@router.get("/{document_type_id}", response_model=ApiResponse[DocumentTypeResponse])
async def get_document_type(
    document_type_id: str,
    service: Annotated[DocumentTypeService, Depends(get_document_type_service)],
):
    document_type = await service.get_document_type(document_type_id)
    return ApiResponse(data=DocumentTypeResponse.model_validate(document_type))


@router.put("/{document_type_id}", response_model=ApiResponse[DocumentTypeResponse])
@limit_writes
async def update_document_type(
    request: Request,
    document_type_id: str,
    body: DocumentTypeUpdateRequest,
    service: Annotated[
        DocumentTypeService, Depends(get_document_type_service_for_write)
    ],
):
    """Update name, description or identity flag (partial)."""
    updated = await service.update_document_type(
        document_type_id,
        name=body.name,
        description=body.description,
        is_identity=body.is_identity,
    )
    return ApiResponse(
        message="Document type updated",
        data=DocumentTypeResponse.model_validate(updated),
    )


@router.delete(
    "/{document_type_id}", response_model=ApiResponse[DocumentTypeResponse]
)
@limit_writes
async def delete_document_type(
    request: Request,
    document_type_id: str,
    service: Annotated[
        DocumentTypeService, Depends(get_document_type_service_for_write)
    ],
):
    """Soft delete; the type stops counting as required for every employee."""
    deleted = await service.delete_document_type(document_type_id)
    return ApiResponse(
        message="Document type deleted",
        data=DocumentTypeResponse.model_validate(deleted),
    )


@router.patch(
    "/{document_type_id}/restore", response_model=ApiResponse[DocumentTypeResponse]
)
@limit_writes
async def restore_document_type(
    request: Request,
    document_type_id: str,
    service: Annotated[
        DocumentTypeService, Depends(get_document_type_service_for_write)
    ],
):
    restored = await service.restore_document_type(document_type_id)
    return ApiResponse(
        message="Document type restored",
        data=DocumentTypeResponse.model_validate(restored),
    )


@router.get(
    "/{document_type_id}/employees",
    response_model=ApiResponse[list[EmployeeResponse]],
)
async def get_linked_employees(
    document_type_id: str,
    service: Annotated[DocumentTypeService, Depends(get_document_type_service)],
    page: int = Query(1),
    limit: int = Query(10),
):
    """Active employees with an active link to the document type."""
    result = await service.get_linked_employees(
        document_type_id, page=page, limit=limit
    )
    return ApiResponse(
        data=[EmployeeResponse.model_validate(e) for e in result.items],
        pagination=pagination_of(result.pagination),
    )
