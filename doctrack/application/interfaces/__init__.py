"""Application ports (Protocols) implemented by infrastructure."""

from doctrack.application.interfaces.repositories import (
    IDocumentRepository,
    IDocumentTypeRepository,
    IEmployeeRepository,
    ILinkRepository,
)
from doctrack.application.interfaces.unit_of_work import IUnitOfWork

__all__ = [
    "IDocumentRepository",
    "IDocumentTypeRepository",
    "IEmployeeRepository",
    "ILinkRepository",
    "IUnitOfWork",
]
