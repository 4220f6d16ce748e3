"""Document ORM model: a submitted (or pending) value for an employee and type."""

from sqlalchemy import Enum, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from doctrack.domain.enums import DocumentStatus
from doctrack.infrastructure.persistence.database import Base
from doctrack.infrastructure.persistence.models.mixins import AuditedModel


class Document(AuditedModel, Base):
    """Document record. Table: document. At most one active row per (employee, type)."""

    __tablename__ = "document"

    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[DocumentStatus] = mapped_column(
        Enum(
            DocumentStatus,
            name="document_status",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=DocumentStatus.PENDING,
    )
    employee_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("employee.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    document_type_id: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("document_type.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        Index(
            "uq_document_active_employee_type",
            "employee_id",
            "document_type_id",
            unique=True,
            postgresql_where=text("is_active"),
        ),
        Index("ix_document_employee_status", "employee_id", "status"),
    )
