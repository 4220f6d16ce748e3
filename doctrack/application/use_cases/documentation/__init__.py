"""Documentation use cases: link/submission resolution, reconciliation, aggregation."""

from doctrack.application.use_cases.documentation.aggregation import DocumentAggregator
from doctrack.application.use_cases.documentation.documentation_service import (
    EmployeeDocumentationService,
)
from doctrack.application.use_cases.documentation.link_resolver import LinkResolver
from doctrack.application.use_cases.documentation.reconciliation import (
    ReconciliationEngine,
)
from doctrack.application.use_cases.documentation.submission_resolver import (
    SubmissionResolver,
)

__all__ = [
    "DocumentAggregator",
    "EmployeeDocumentationService",
    "LinkResolver",
    "ReconciliationEngine",
    "SubmissionResolver",
]
