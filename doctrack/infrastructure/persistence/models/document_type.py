"""DocumentType ORM model. Name stored uppercase and unique case-insensitively."""

from sqlalchemy import Boolean, Index, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from doctrack.infrastructure.persistence.database import Base
from doctrack.infrastructure.persistence.models.mixins import AuditedModel


class DocumentType(AuditedModel, Base):
    """Document type (CPF, RG, ...). Table: document_type."""

    __tablename__ = "document_type"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_identity: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )


Index("uq_document_type_name_lower", func.lower(DocumentType.name), unique=True)
