"""Document type use cases."""

from doctrack.application.use_cases.document_types.document_type_operations import (
    DocumentTypeService,
)

__all__ = ["DocumentTypeService"]
