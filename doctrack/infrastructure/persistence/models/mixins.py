"""Column sets shared by the doctrack tables.

Every table carries a 24-hex id, audit timestamps and the is_active /
deleted_at pair that soft delete and restore toggle.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from doctrack.shared.utils.generators import generate_object_id


class ObjectIdMixin:
    """Primary key as an ObjectId hex string generated on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(24), primary_key=True, default=generate_object_id)


class TimestampMixin:
    """Database-maintained created_at / updated_at."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class SoftDeleteMixin:
    """Moment of the last soft delete; cleared again on restore."""

    @declared_attr
    def deleted_at(cls) -> Mapped[datetime | None]:
        return mapped_column(DateTime(timezone=True), nullable=True, index=True)


class ActiveFlagMixin(SoftDeleteMixin):
    """Soft delete with an explicit is_active flag (default true) plus deleted_at."""

    @declared_attr
    def is_active(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean,
            nullable=False,
            default=True,
            server_default=text("true"),
            index=True,
        )


class AuditedModel(ObjectIdMixin, TimestampMixin, ActiveFlagMixin):
    """Combined mixin: hex id + created_at/updated_at + is_active/deleted_at."""

    __abstract__ = True
