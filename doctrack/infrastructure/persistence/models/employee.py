"""Employee ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from doctrack.infrastructure.persistence.database import Base
from doctrack.infrastructure.persistence.models.mixins import AuditedModel


class Employee(AuditedModel, Base):
    """Employee. Table: employee. document unique among active employees."""

    __tablename__ = "employee"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    document: Mapped[str] = mapped_column(String(14), nullable=False)
    hired_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        Index(
            "uq_employee_active_document",
            "document",
            unique=True,
            postgresql_where=text("is_active"),
        ),
    )
