"""Employee API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from doctrack.schemas.common import ORMModel


class RequiredDocumentRequest(BaseModel):
    """One required document at employee creation; value optional."""

    document_type_id: str = Field(..., min_length=1)
    value: str | None = Field(default=None, max_length=255)


class EmployeeCreateRequest(BaseModel):
    """Request body for creating an employee."""

    name: str = Field(..., min_length=3, max_length=100)
    document: str = Field(..., description="Format XXX.XXX.XXX-XX")
    hired_at: datetime | None = None
    required_documents: list[RequiredDocumentRequest] = Field(default_factory=list)


class EmployeeUpdateRequest(BaseModel):
    """Request body for PUT (fields left out are unchanged)."""

    name: str | None = Field(default=None, min_length=3, max_length=100)
    document: str | None = None
    hired_at: datetime | None = None


class DocumentTypeIdsRequest(BaseModel):
    """Document type ids to link to, or unlink from, an employee."""

    document_type_ids: list[str] = Field(default_factory=list)


class EmployeeResponse(ORMModel):
    """Employee response."""

    id: str
    name: str
    document: str
    hired_at: datetime | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None
    deleted_at: datetime | None


class DocumentationSummaryResponse(ORMModel):
    required: int
    sent: int
    pending: int
    has_required_documents: bool
    is_complete: bool
    completion_percentage: int


class EmployeeSearchItem(EmployeeResponse):
    """Employee with its documentation summary (search results)."""

    documentation_summary: DocumentationSummaryResponse
