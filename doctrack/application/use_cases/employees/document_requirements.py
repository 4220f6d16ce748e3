"""Required-document mutations: create employee, link/unlink types, send documents, restore links.

Every method validates all of its input before the first write, so a
failure leaves no partial state even without a surrounding transaction.
Callers still run these inside one transactional session.
"""

from __future__ import annotations

from collections.abc import Iterable

from doctrack.application.dtos.document import DocumentResult
from doctrack.application.dtos.document_type import DocumentTypeResult
from doctrack.application.dtos.employee import EmployeeCreate, EmployeeResult
from doctrack.application.dtos.link import LinkResult, RequiredDocumentLink
from doctrack.application.interfaces.repositories import (
    IDocumentRepository,
    IDocumentTypeRepository,
    IEmployeeRepository,
    ILinkRepository,
)
from doctrack.application.services.document_values import (
    DEFAULT_IDENTITY_TYPE_NAMES,
    clean_document_value,
    is_identity_type,
)
from doctrack.application.services.validation import (
    validate_employee_document,
    validate_employee_name,
    validate_object_id,
    validate_object_ids,
)
from doctrack.domain.enums import DocumentStatus
from doctrack.domain.exceptions import (
    DocumentTypeNotFoundException,
    DuplicateEmployeeException,
    EmployeeNotFoundException,
    ValidationException,
)
from doctrack.shared.telemetry.logging import get_logger
from doctrack.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class DocumentRequirementCoordinator:
    """Keeps links and documents consistent for employee/document type pairs.

    Pair state: NOT_REQUIRED -> REQUIRED_PENDING -> REQUIRED_SENT. Unlink
    returns to NOT_REQUIRED without touching documents; there is no unsend.
    """

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        document_type_repo: IDocumentTypeRepository,
        link_repo: ILinkRepository,
        document_repo: IDocumentRepository,
        identity_type_names: Iterable[str] = DEFAULT_IDENTITY_TYPE_NAMES,
    ) -> None:
        self._employee_repo = employee_repo
        self._document_type_repo = document_type_repo
        self._link_repo = link_repo
        self._document_repo = document_repo
        self._identity_type_names = tuple(identity_type_names)

    def _is_identity(self, document_type: DocumentTypeResult) -> bool:
        return is_identity_type(document_type, self._identity_type_names)

    async def _get_employee(self, employee_id: str) -> EmployeeResult:
        validate_object_id(employee_id, "employee_id")
        employee = await self._employee_repo.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundException(employee_id)
        return employee

    async def _get_document_types(
        self, type_ids: list[str]
    ) -> dict[str, DocumentTypeResult]:
        """Resolve every id to an active document type or raise for the first missing one."""
        found = {t.id: t for t in await self._document_type_repo.get_by_ids(type_ids)}
        for type_id in type_ids:
            if type_id not in found:
                raise DocumentTypeNotFoundException(type_id)
        return found

    async def _upsert_document(
        self,
        employee_id: str,
        document_type_id: str,
        value: str,
        status: DocumentStatus,
    ) -> DocumentResult:
        """Update the pair's active document in place, or create it."""
        existing = await self._document_repo.get_active_for_pair(
            employee_id, document_type_id
        )
        if existing:
            updated = await self._document_repo.update_document(
                existing.id, value=value, status=status
            )
            if updated is not None:
                return updated
        return await self._document_repo.create_document(
            employee_id, document_type_id, value, status
        )

    async def _activate_link(self, employee_id: str, document_type_id: str) -> LinkResult:
        """Restore the pair's link if it exists, else create it."""
        link = await self._link_repo.get_by_employee_and_type(
            employee_id, document_type_id
        )
        if link is None:
            return await self._link_repo.create_link(employee_id, document_type_id)
        if link.active:
            return link
        restored = await self._link_repo.set_active(link.id, True)
        return restored or link

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResult:
        """Create an employee and, optionally, its required documents.

        Identity types (CPF) get a SENT document holding the employee's own
        document; other types get SENT with the supplied value or PENDING
        with an empty value. Every entry also gets an active link.

        Raises:
            ValidationException: Invalid fields or identity value mismatch.
            InvalidIdFormatException: Malformed document type id.
            DuplicateEmployeeException: Document already held by an active employee.
            DocumentTypeNotFoundException: Unknown or soft-deleted document type.
        """
        name = validate_employee_name(data.name)
        document = validate_employee_document(data.document)
        if await self._employee_repo.get_by_document(document):
            raise DuplicateEmployeeException(document)

        entries: dict[str, str | None] = {}
        for entry in data.required_documents:
            type_id = validate_object_id(entry.document_type_id, "document_type_id")
            entries.setdefault(type_id, entry.value)
        types = await self._get_document_types(list(entries))

        planned: list[tuple[str, str, DocumentStatus]] = []
        for type_id, value in entries.items():
            document_type = types[type_id]
            if self._is_identity(document_type):
                if value and clean_document_value(value) != clean_document_value(
                    document
                ):
                    raise ValidationException(
                        f"Value for {document_type.name} must match the employee document",
                        field="required_documents",
                    )
                planned.append(
                    (type_id, clean_document_value(document), DocumentStatus.SENT)
                )
            elif value and value.strip():
                planned.append((type_id, clean_document_value(value), DocumentStatus.SENT))
            else:
                planned.append((type_id, "", DocumentStatus.PENDING))

        employee = await self._employee_repo.create_employee(
            name, document, data.hired_at or utc_now()
        )
        for type_id, value, status in planned:
            await self._activate_link(employee.id, type_id)
            await self._upsert_document(employee.id, type_id, value, status)
        logger.info(
            "Created employee %s with %d required document(s)", employee.id, len(planned)
        )
        return employee

    async def link_document_types(
        self, employee_id: str, type_ids: list[str]
    ) -> list[RequiredDocumentLink]:
        """Require the given document types from the employee.

        All-or-nothing: every id is checked before any link is written.
        Inactive links are restored instead of duplicated. Identity types get
        an automatic SENT document with the employee's own document.

        Raises:
            InvalidIdFormatException: Malformed id.
            EmployeeNotFoundException: Unknown or soft-deleted employee.
            DocumentTypeNotFoundException: Any type missing (no links created).
            ValidationException: Any type already actively linked (no links created).
        """
        if not type_ids:
            return []
        ids = validate_object_ids(type_ids, "document_type_id")
        employee = await self._get_employee(employee_id)
        types = await self._get_document_types(ids)

        already_linked: list[str] = []
        for type_id in ids:
            link = await self._link_repo.get_by_employee_and_type(employee.id, type_id)
            if link is not None and link.active:
                already_linked.append(types[type_id].name)
        if already_linked:
            raise ValidationException(
                f"Document types already linked: {', '.join(already_linked)}",
                field="document_type_ids",
            )

        linked: list[RequiredDocumentLink] = []
        for type_id in ids:
            document_type = types[type_id]
            link = await self._activate_link(employee.id, type_id)
            if self._is_identity(document_type):
                await self._upsert_document(
                    employee.id,
                    type_id,
                    clean_document_value(employee.document),
                    DocumentStatus.SENT,
                )
            linked.append(RequiredDocumentLink(link=link, document_type=document_type))
        logger.info("Linked %d document type(s) to employee %s", len(linked), employee.id)
        return linked

    async def unlink_document_types(
        self, employee_id: str, type_ids: list[str]
    ) -> list[str]:
        """Stop requiring the given types. Already-unlinked types are skipped.

        Documents are left untouched.

        Returns:
            Ids of the types whose link was deactivated by this call.

        Raises:
            InvalidIdFormatException: Malformed id.
            EmployeeNotFoundException: Unknown or soft-deleted employee.
        """
        if not type_ids:
            return []
        ids = validate_object_ids(type_ids, "document_type_id")
        employee = await self._get_employee(employee_id)
        unlinked: list[str] = []
        for type_id in ids:
            link = await self._link_repo.get_by_employee_and_type(employee.id, type_id)
            if link is None or not link.active:
                continue
            await self._link_repo.set_active(link.id, False)
            unlinked.append(type_id)
        logger.info(
            "Unlinked %d document type(s) from employee %s", len(unlinked), employee.id
        )
        return unlinked

    async def send_document(
        self, employee_id: str, document_type_id: str, value: str
    ) -> DocumentResult:
        """Record a submitted value; updates the pair's active document in place.

        The value is normalized to letters and digits only.

        Raises:
            InvalidIdFormatException: Malformed id.
            EmployeeNotFoundException: Unknown or soft-deleted employee.
            DocumentTypeNotFoundException: Unknown or soft-deleted type.
            ValidationException: Empty value or type not linked to the employee.
        """
        validate_object_id(document_type_id, "document_type_id")
        employee = await self._get_employee(employee_id)
        document_type = await self._document_type_repo.get_by_id(document_type_id)
        if not document_type:
            raise DocumentTypeNotFoundException(document_type_id)
        normalized = clean_document_value(value)
        if not normalized:
            raise ValidationException("Document value is required", field="value")
        link = await self._link_repo.get_by_employee_and_type(
            employee.id, document_type_id
        )
        if link is None or not link.active:
            raise ValidationException(
                f"Document type {document_type.name} is not linked to this employee",
                field="document_type_id",
            )
        return await self._upsert_document(
            employee.id, document_type_id, normalized, DocumentStatus.SENT
        )

    async def restore_document_type_link(
        self, employee_id: str, document_type_id: str
    ) -> RequiredDocumentLink:
        """Reactivate the pair's link, creating it when none exists. Idempotent.

        Raises:
            InvalidIdFormatException: Malformed id.
            EmployeeNotFoundException: Unknown or soft-deleted employee.
            DocumentTypeNotFoundException: Unknown or soft-deleted type.
        """
        validate_object_id(document_type_id, "document_type_id")
        employee = await self._get_employee(employee_id)
        document_type = await self._document_type_repo.get_by_id(document_type_id)
        if not document_type:
            raise DocumentTypeNotFoundException(document_type_id)
        link = await self._activate_link(employee.id, document_type_id)
        return RequiredDocumentLink(link=link, document_type=document_type)
