"""Persistence repositories. Re-exports for dependency injection."""

from doctrack.infrastructure.persistence.repositories.base import BaseRepository
from doctrack.infrastructure.persistence.repositories.document_repo import (
    DocumentRepository,
)
from doctrack.infrastructure.persistence.repositories.document_type_repo import (
    DocumentTypeRepository,
)
from doctrack.infrastructure.persistence.repositories.employee_repo import (
    EmployeeRepository,
)
from doctrack.infrastructure.persistence.repositories.link_repo import LinkRepository

__all__ = [
    "BaseRepository",
    "DocumentRepository",
    "DocumentTypeRepository",
    "EmployeeRepository",
    "LinkRepository",
]
