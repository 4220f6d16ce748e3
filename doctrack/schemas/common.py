"""Response envelope and pagination schemas shared by all endpoints."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from doctrack.application.dtos.pagination import PaginationInfo

T = TypeVar("T")


class ORMModel(BaseModel):
    """Base for responses built from application DTOs (attribute access)."""

    model_config = ConfigDict(from_attributes=True)


class PaginationResponse(ORMModel):
    """Pagination block of a list response."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool = False
    has_previous_page: bool = False


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: {success, message?, data, pagination?}."""

    success: bool = True
    message: str | None = None
    data: T | None = None
    pagination: PaginationResponse | None = None


class ErrorInfo(BaseModel):
    """error block of a failure envelope."""

    type: str
    code: str
    timestamp: datetime
    path: str
    method: str
    details: Any = None


class ErrorResponse(BaseModel):
    """Failure envelope: {success: false, message, error}."""

    success: bool = Field(default=False)
    message: str
    error: ErrorInfo


def pagination_of(info: PaginationInfo) -> PaginationResponse:
    """Convert application pagination metadata to its response schema."""
    return PaginationResponse.model_validate(info)
