"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() builders for application services. Services are
built from SQLAlchemy repositories here; routes depend only on these
builders, never on infrastructure directly.
"""

from doctrack.api.v1.dependencies.document import (
    get_document_aggregator,
    get_document_service,
    get_document_service_for_write,
)
from doctrack.api.v1.dependencies.document_type import (
    get_document_type_service,
    get_document_type_service_for_write,
)
from doctrack.api.v1.dependencies.employee import (
    get_documentation_service,
    get_employee_service,
    get_employee_service_for_write,
    get_reconciliation_engine,
    get_requirement_coordinator,
)

__all__ = [
    "get_document_aggregator",
    "get_document_service",
    "get_document_service_for_write",
    "get_document_type_service",
    "get_document_type_service_for_write",
    "get_documentation_service",
    "get_employee_service",
    "get_employee_service_for_write",
    "get_reconciliation_engine",
    "get_requirement_coordinator",
]
