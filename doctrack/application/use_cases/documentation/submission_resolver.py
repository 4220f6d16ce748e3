"""Submission resolver: an employee's SENT documents keyed by document type."""

from __future__ import annotations

from doctrack.application.dtos.document import DocumentResult
from doctrack.application.interfaces.repositories import IDocumentRepository


class SubmissionResolver:
    """Builds a document_type_id -> Document lookup of active SENT documents."""

    def __init__(self, document_repo: IDocumentRepository) -> None:
        self._document_repo = document_repo

    async def sent_documents(
        self, employee_id: str, type_ids: list[str] | None = None
    ) -> dict[str, DocumentResult]:
        """Return active SENT documents of the employee keyed by document type id.

        Args:
            employee_id: Employee id.
            type_ids: Restrict to these types; None means every type. An empty
                list yields an empty mapping without querying.

        Returns:
            Mapping of document_type_id to the first (oldest) matching document.
        """
        if type_ids is not None and not type_ids:
            return {}
        documents = await self._document_repo.list_sent_by_employee(
            employee_id, type_ids
        )
        sent: dict[str, DocumentResult] = {}
        for document in documents:
            sent.setdefault(str(document.document_type_id), document)
        return sent
