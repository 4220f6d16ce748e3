"""Employee use cases: required-document mutations and employee maintenance."""

from doctrack.application.use_cases.employees.document_requirements import (
    DocumentRequirementCoordinator,
)
from doctrack.application.use_cases.employees.employee_operations import (
    EmployeeService,
)

__all__ = ["DocumentRequirementCoordinator", "EmployeeService"]
