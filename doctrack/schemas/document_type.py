"""Document type API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from doctrack.schemas.common import ORMModel


class DocumentTypeCreateRequest(BaseModel):
    """Request body for creating a document type. Name is stored uppercase."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)
    is_identity: bool = False


class DocumentTypeUpdateRequest(BaseModel):
    """Request body for PUT (fields left out are unchanged)."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)
    is_identity: bool | None = None


class DocumentTypeInfo(ORMModel):
    """Compact document type embedded in documentation responses."""

    id: str
    name: str
    description: str | None = None


class DocumentTypeResponse(ORMModel):
    """Document type full response."""

    id: str
    name: str
    description: str | None
    is_identity: bool
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None
    deleted_at: datetime | None
