"""EmployeeDocumentTypeLink ORM model: which document types an employee must provide."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    String,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from doctrack.infrastructure.persistence.database import Base
from doctrack.infrastructure.persistence.models.mixins import (
    ObjectIdMixin,
    TimestampMixin,
)


class EmployeeDocumentTypeLink(ObjectIdMixin, TimestampMixin, Base):
    """Required document link. Unique (employee_id, document_type_id); active is the soft delete."""

    __tablename__ = "employee_document_type_link"

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
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        UniqueConstraint(
            "employee_id", "document_type_id", name="uq_link_employee_document_type"
        ),
    )
