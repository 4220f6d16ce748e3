"""Document use cases."""

from doctrack.application.use_cases.documents.document_operations import DocumentService

__all__ = ["DocumentService"]
