"""Document API: individual records plus company-wide pending/sent views.

/pending and /sent are declared before /{document_id} so they are not
captured as ids.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from doctrack.api.v1.dependencies import (
    get_document_aggregator,
    get_document_service,
    get_document_service_for_write,
)
from doctrack.application.dtos.document import DocumentListFilter
from doctrack.application.dtos.documentation import CompanyDocumentFilter
from doctrack.application.dtos.pagination import Page
from doctrack.application.services.validation import parse_status_filter
from doctrack.application.use_cases.documentation import DocumentAggregator
from doctrack.application.use_cases.documents import DocumentService
from doctrack.core.limiter import limit_writes
from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus
from doctrack.domain.exceptions import ValidationException
from doctrack.schemas.common import ApiResponse, pagination_of
from doctrack.schemas.document import DocumentResponse
from doctrack.schemas.documentation import EmployeeDocumentGroupResponse

router = APIRouter()


def _company_filter(
    status: str | None,
    page: int,
    limit: int,
    document_type_id: str | None,
    default: ActiveStatusFilter,
) -> CompanyDocumentFilter:
    return CompanyDocumentFilter(
        status=parse_status_filter(status, default),
        page=page,
        limit=limit,
        document_type_id=document_type_id or None,
    )


def _groups_response(result: Page) -> ApiResponse[list[EmployeeDocumentGroupResponse]]:
    return ApiResponse(
        data=[EmployeeDocumentGroupResponse.model_validate(g) for g in result.items],
        pagination=pagination_of(result.pagination),
    )


def _parse_document_status(value: str | None) -> DocumentStatus | None:
    if not value:
        return None
    try:
        return DocumentStatus(value.strip().upper())
    except ValueError as e:
        raise ValidationException(
            f"Invalid document status {value!r}; expected one of "
            f"{', '.join(DocumentStatus.values())}",
            field="status",
        ) from e


@router.get("", response_model=ApiResponse[list[DocumentResponse]])
async def list_documents(
    service: Annotated[DocumentService, Depends(get_document_service)],
    employee_id: str | None = Query(None),
    document_type_id: str | None = Query(None),
    status: str | None = Query(None, description="PENDING or SENT"),
    include_inactive: bool = Query(False),
    page: int = Query(1),
    limit: int = Query(10),
):
    result = await service.list_documents(
        DocumentListFilter(
            employee_id=employee_id or None,
            document_type_id=document_type_id or None,
            status=_parse_document_status(status),
            include_inactive=include_inactive,
        ),
        page=page,
        limit=limit,
    )
    return ApiResponse(
        data=[DocumentResponse.model_validate(d) for d in result.items],
        pagination=pagination_of(result.pagination),
    )


@router.get(
    "/pending", response_model=ApiResponse[list[EmployeeDocumentGroupResponse]]
)
async def list_pending_across_company(
    aggregator: Annotated[DocumentAggregator, Depends(get_document_aggregator)],
    status: str | None = Query(None, description="Link state: active, inactive or all"),
    page: int = Query(1),
    limit: int = Query(10),
    document_type_id: str | None = Query(None),
):
    """Pending documents of all active employees, grouped by employee."""
    result = await aggregator.pending_across_company(
        _company_filter(status, page, limit, document_type_id, ActiveStatusFilter.ALL)
    )
    return _groups_response(result)


@router.get("/sent", response_model=ApiResponse[list[EmployeeDocumentGroupResponse]])
async def list_sent_across_company(
    aggregator: Annotated[DocumentAggregator, Depends(get_document_aggregator)],
    status: str | None = Query(None, description="Document state: active, inactive or all"),
    page: int = Query(1),
    limit: int = Query(10),
    document_type_id: str | None = Query(None),
):
    """Sent documents of all active employees, grouped by employee."""
    result = await aggregator.sent_across_company(
        _company_filter(
            status, page, limit, document_type_id, ActiveStatusFilter.ACTIVE
        )
    )
    return _groups_response(result)


@router.get("/{document_id}", response_model=ApiResponse[DocumentResponse])
async def get_document(
    document_id: str,
    service: Annotated[DocumentService, Depends(get_document_service)],
):
    document = await service.get_document(document_id)
    return ApiResponse(data=DocumentResponse.model_validate(document))


@router.delete("/{document_id}", response_model=ApiResponse[DocumentResponse])
@limit_writes
async def delete_document(
    request: Request,
    document_id: str,
    service: Annotated[DocumentService, Depends(get_document_service_for_write)],
):
    """Soft delete a document record."""
    deleted = await service.delete_document(document_id)
    return ApiResponse(
        message="Document deleted", data=DocumentResponse.model_validate(deleted)
    )


@router.patch("/{document_id}/restore", response_model=ApiResponse[DocumentResponse])
@limit_writes
async def restore_document(
    request: Request,
    document_id: str,
    service: Annotated[DocumentService, Depends(get_document_service_for_write)],
):
    restored = await service.restore_document(document_id)
    return ApiResponse(
        message="Document restored", data=DocumentResponse.model_validate(restored)
    )
