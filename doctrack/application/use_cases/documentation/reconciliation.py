"""Reconciliation engine: partition required document types into sent and pending."""

from __future__ import annotations

from doctrack.application.dtos.documentation import ReconciliationResult, SentItem
from doctrack.application.dtos.link import RequiredDocumentLink
from doctrack.application.interfaces.repositories import IEmployeeRepository
from doctrack.application.use_cases.documentation.link_resolver import LinkResolver
from doctrack.application.use_cases.documentation.submission_resolver import (
    SubmissionResolver,
)
from doctrack.domain.exceptions import EmployeeNotFoundException


class ReconciliationEngine:
    """Computes pending = required - sent for one employee."""

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        link_resolver: LinkResolver,
        submission_resolver: SubmissionResolver,
    ) -> None:
        self._employee_repo = employee_repo
        self._link_resolver = link_resolver
        self._submission_resolver = submission_resolver

    async def reconcile(self, employee_id: str) -> ReconciliationResult:
        """Return the employee's required types split into sent and pending.

        Args:
            employee_id: Employee id.

        Returns:
            ReconciliationResult; both lists empty when nothing is required.

        Raises:
            EmployeeNotFoundException: If the employee does not exist or is soft-deleted.
        """
        await self.ensure_employee(employee_id)
        sent, pending = await self.partition(employee_id)
        return ReconciliationResult(
            sent=sent, pending=[p.document_type for p in pending]
        )

    async def ensure_employee(self, employee_id: str) -> None:
        if not await self._employee_repo.get_by_id(employee_id):
            raise EmployeeNotFoundException(employee_id)

    async def partition(
        self, employee_id: str
    ) -> tuple[list[SentItem], list[RequiredDocumentLink]]:
        """Split active links into sent items and pending links (no existence check)."""
        required = await self._link_resolver.active_links(employee_id)
        if not required:
            return [], []
        type_ids = [str(r.document_type.id) for r in required if r.document_type.id]
        sent_map = await self._submission_resolver.sent_documents(employee_id, type_ids)
        sent: list[SentItem] = []
        pending: list[RequiredDocumentLink] = []
        for item in required:
            # A type without an id can never be matched, so it stays pending.
            document = (
                sent_map.get(str(item.document_type.id))
                if item.document_type.id
                else None
            )
            if document is None:
                pending.append(item)
            else:
                sent.append(
                    SentItem(
                        document_type=item.document_type,
                        value=document.value,
                        document=document,
                    )
                )
        return sent, pending
