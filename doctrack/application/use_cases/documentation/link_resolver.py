"""Link resolver: an employee's active required document types."""

from __future__ import annotations

from doctrack.application.dtos.document_type import DocumentTypeResult
from doctrack.application.dtos.link import RequiredDocumentLink
from doctrack.application.interfaces.repositories import (
    IDocumentTypeRepository,
    ILinkRepository,
)
from doctrack.domain.enums import ActiveStatusFilter


class LinkResolver:
    """Resolves active links to document types (links ordered by creation, no duplicates).

    Links pointing at a soft-deleted or missing document type are skipped.
    Employee existence is the caller's concern.
    """

    def __init__(
        self,
        link_repo: ILinkRepository,
        document_type_repo: IDocumentTypeRepository,
    ) -> None:
        self._link_repo = link_repo
        self._document_type_repo = document_type_repo

    async def active_links(self, employee_id: str) -> list[RequiredDocumentLink]:
        """Return active links with their document types, oldest link first."""
        links = await self._link_repo.list_by_employee(
            employee_id, ActiveStatusFilter.ACTIVE
        )
        if not links:
            return []
        type_ids = list(dict.fromkeys(link.document_type_id for link in links))
        types = {
            t.id: t for t in await self._document_type_repo.get_by_ids(type_ids)
        }
        resolved: list[RequiredDocumentLink] = []
        seen: set[str] = set()
        for link in links:
            if link.document_type_id in seen:
                continue
            document_type = types.get(link.document_type_id)
            if document_type is None:
                continue
            seen.add(link.document_type_id)
            resolved.append(RequiredDocumentLink(link=link, document_type=document_type))
        return resolved

    async def active_required_types(self, employee_id: str) -> list[DocumentTypeResult]:
        """Return the document types the employee is currently required to provide."""
        return [r.document_type for r in await self.active_links(employee_id)]
