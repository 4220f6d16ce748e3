"""DTOs for employee use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from doctrack.domain.enums import ActiveStatusFilter


@dataclass(frozen=True)
class EmployeeResult:
    """Employee read-model (result of get, list, create, update)."""

    id: str
    name: str
    document: str
    hired_at: datetime
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


@dataclass(frozen=True)
class RequiredDocumentInput:
    """One entry of the required documents supplied when creating an employee."""

    document_type_id: str
    value: str | None = None


@dataclass(frozen=True)
class EmployeeCreate:
    """Input for creating an employee, optionally with required documents."""

    name: str
    document: str
    hired_at: datetime | None = None
    required_documents: list[RequiredDocumentInput] = field(default_factory=list)


@dataclass(frozen=True)
class EmployeeUpdate:
    """Partial update; None fields are left unchanged."""

    name: str | None = None
    document: str | None = None
    hired_at: datetime | None = None


@dataclass(frozen=True)
class EmployeeListFilter:
    """Filters for listing and searching employees."""

    status: ActiveStatusFilter = ActiveStatusFilter.ALL
    name: str | None = None
