"""Document API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from doctrack.domain.enums import DocumentStatus
from doctrack.schemas.common import ORMModel


class SendDocumentRequest(BaseModel):
    """Value being submitted; punctuation is stripped before storing."""

    value: str = Field(..., min_length=1, max_length=255)


class DocumentResponse(ORMModel):
    """Document record response."""

    id: str
    value: str
    status: DocumentStatus
    employee_id: str
    document_type_id: str
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None
    deleted_at: datetime | None
