"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Soft-deleted rows are excluded unless include_inactive is passed.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from doctrack.domain.enums import ActiveStatusFilter, DocumentStatus

if TYPE_CHECKING:
    from doctrack.application.dtos.document import DocumentListFilter, DocumentResult
    from doctrack.application.dtos.document_type import DocumentTypeResult
    from doctrack.application.dtos.employee import EmployeeResult
    from doctrack.application.dtos.link import LinkResult


class IEmployeeRepository(Protocol):
    """Protocol for employee repository (DIP)."""

    async def get_by_id(
        self, employee_id: str, *, include_inactive: bool = False
    ) -> EmployeeResult | None:
        """Return employee by id; soft-deleted employees only with include_inactive."""

    async def get_by_document(self, document: str) -> EmployeeResult | None:
        """Return the active employee holding this document, if any."""

    async def get_by_ids(self, employee_ids: list[str]) -> list[EmployeeResult]:
        """Return active employees with the given ids, ordered by name."""

    async def list_employees(
        self,
        status: ActiveStatusFilter,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[EmployeeResult]:
        """Return employees matching status and (case-insensitive) name, ordered by name."""

    async def count_employees(
        self, status: ActiveStatusFilter, name: str | None = None
    ) -> int:
        """Return the number of employees matching status and name."""

    async def search(
        self,
        query: str,
        document_pattern: str | None,
        status: ActiveStatusFilter,
        skip: int = 0,
        limit: int = 100,
    ) -> list[EmployeeResult]:
        """Return employees whose name contains query or whose document matches document_pattern (regex)."""

    async def count_search(
        self, query: str, document_pattern: str | None, status: ActiveStatusFilter
    ) -> int:
        """Return the number of employees matched by search()."""

    async def create_employee(
        self, name: str, document: str, hired_at: datetime
    ) -> EmployeeResult:
        """Create an active employee."""

    async def update_employee(
        self,
        employee_id: str,
        *,
        name: str | None = None,
        document: str | None = None,
        hired_at: datetime | None = None,
    ) -> EmployeeResult | None:
        """Update mutable fields of an active employee; None if not found."""

    async def set_active(
        self, employee_id: str, is_active: bool
    ) -> EmployeeResult | None:
        """Soft delete (False) or restore (True); stamps or clears deleted_at."""


class IDocumentTypeRepository(Protocol):
    """Protocol for document type repository (DIP)."""

    async def get_by_id(
        self, document_type_id: str, *, include_inactive: bool = False
    ) -> DocumentTypeResult | None:
        """Return document type by id."""

    async def get_by_ids(
        self, document_type_ids: list[str], *, include_inactive: bool = False
    ) -> list[DocumentTypeResult]:
        """Return document types with the given ids (any order)."""

    async def get_by_name(self, name: str) -> DocumentTypeResult | None:
        """Return the document type with this name (case-insensitive), active or not."""

    async def list_document_types(
        self,
        status: ActiveStatusFilter,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[DocumentTypeResult]:
        """Return document types ordered by name."""

    async def count_document_types(
        self, status: ActiveStatusFilter, name: str | None = None
    ) -> int:
        """Return the number of document types matching the filters."""

    async def create_document_type(
        self, name: str, description: str | None, is_identity: bool
    ) -> DocumentTypeResult:
        """Create an active document type (name already normalized)."""

    async def update_document_type(
        self,
        document_type_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        is_identity: bool | None = None,
    ) -> DocumentTypeResult | None:
        """Update an active document type; None if not found."""

    async def set_active(
        self, document_type_id: str, is_active: bool
    ) -> DocumentTypeResult | None:
        """Soft delete (False) or restore (True)."""


class ILinkRepository(Protocol):
    """Protocol for employee/document type link repository (DIP)."""

    async def list_by_employee(
        self, employee_id: str, status: ActiveStatusFilter = ActiveStatusFilter.ACTIVE
    ) -> list[LinkResult]:
        """Return the employee's links ordered by creation (oldest first)."""

    async def get_by_employee_and_type(
        self, employee_id: str, document_type_id: str
    ) -> LinkResult | None:
        """Return the link for the pair in any state (at most one exists)."""

    async def create_link(self, employee_id: str, document_type_id: str) -> LinkResult:
        """Create an active link."""

    async def set_active(self, link_id: str, active: bool) -> LinkResult | None:
        """Soft delete (False) or restore (True) a link."""

    async def list_linked_employee_ids(
        self, document_type_id: str, skip: int = 0, limit: int = 100
    ) -> list[str]:
        """Return ids of active employees with an active link to the type, ordered by employee name."""

    async def count_linked_employees(self, document_type_id: str) -> int:
        """Return the number of active employees with an active link to the type."""


class IDocumentRepository(Protocol):
    """Protocol for document repository (DIP)."""

    async def get_by_id(
        self, document_id: str, *, include_inactive: bool = False
    ) -> DocumentResult | None:
        """Return document by id."""

    async def get_active_for_pair(
        self, employee_id: str, document_type_id: str
    ) -> DocumentResult | None:
        """Return the single active document for (employee, type), if any."""

    async def list_sent_by_employee(
        self, employee_id: str, document_type_ids: list[str] | None = None
    ) -> list[DocumentResult]:
        """Return active SENT documents of the employee, oldest first; optional type filter."""

    async def list_documents(
        self, filters: DocumentListFilter, skip: int = 0, limit: int = 100
    ) -> list[DocumentResult]:
        """Return documents matching filters, newest first."""

    async def count_documents(self, filters: DocumentListFilter) -> int:
        """Return the number of documents matching filters."""

    async def create_document(
        self,
        employee_id: str,
        document_type_id: str,
        value: str,
        status: DocumentStatus,
    ) -> DocumentResult:
        """Create an active document."""

    async def update_document(
        self,
        document_id: str,
        *,
        value: str | None = None,
        status: DocumentStatus | None = None,
    ) -> DocumentResult | None:
        """Update value/status of an active document and re-stamp updated_at."""

    async def set_active(
        self, document_id: str, is_active: bool
    ) -> DocumentResult | None:
        """Soft delete (False) or restore (True)."""
