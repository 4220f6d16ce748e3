"""initial_schema: employee, document_type, employee_document_type_link, document

Revision ID: 4f1c2a9b7e31
Revises:
Create Date: 2026-10-19 09:12:44.318207

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9b7e31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

document_status = sa.Enum("PENDING", "SENT", name="document_status")


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "employee",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("document", sa.String(length=14), nullable=False),
        sa.Column(
            "hired_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_employee_name", "employee", ["name"])
    op.create_index("ix_employee_is_active", "employee", ["is_active"])
    op.create_index("ix_employee_deleted_at", "employee", ["deleted_at"])
    op.create_index(
        "uq_employee_active_document",
        "employee",
        ["document"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )

    op.create_table(
        "document_type",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "is_identity",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_document_type_is_active", "document_type", ["is_active"])
    op.create_index("ix_document_type_deleted_at", "document_type", ["deleted_at"])
    op.create_index(
        "uq_document_type_name_lower",
        "document_type",
        [sa.text("lower(name)")],
        unique=True,
    )

    op.create_table(
        "employee_document_type_link",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("employee_id", sa.String(length=24), nullable=False),
        sa.Column("document_type_id", sa.String(length=24), nullable=False),
        sa.Column(
            "active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["employee_id"], ["employee.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(
            ["document_type_id"], ["document_type.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "employee_id", "document_type_id", name="uq_link_employee_document_type"
        ),
    )
    op.create_index(
        "ix_employee_document_type_link_employee_id",
        "employee_document_type_link",
        ["employee_id"],
    )
    op.create_index(
        "ix_employee_document_type_link_document_type_id",
        "employee_document_type_link",
        ["document_type_id"],
    )

    op.create_table(
        "document",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("status", document_status, nullable=False),
        sa.Column("employee_id", sa.String(length=24), nullable=False),
        sa.Column("document_type_id", sa.String(length=24), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        *_audit_columns(),
        sa.ForeignKeyConstraint(["employee_id"], ["employee.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(
            ["document_type_id"], ["document_type.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_document_employee_id", "document", ["employee_id"])
    op.create_index("ix_document_document_type_id", "document", ["document_type_id"])
    op.create_index("ix_document_is_active", "document", ["is_active"])
    op.create_index("ix_document_deleted_at", "document", ["deleted_at"])
    op.create_index("ix_document_employee_status", "document", ["employee_id", "status"])
    op.create_index(
        "uq_document_active_employee_type",
        "document",
        ["employee_id", "document_type_id"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("document")
    op.drop_table("employee_document_type_link")
    op.drop_table("document_type")
    op.drop_table("employee")
    document_status.drop(op.get_bind(), checkfirst=True)
