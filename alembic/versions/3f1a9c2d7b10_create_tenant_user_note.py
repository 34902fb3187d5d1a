"""create Tenant, User and Note tables

Revision ID: 3f1a9c2d7b10
Revises: 
Create Date: 2026-10-19 09:12:41.204518

"""
from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1a9c2d7b10'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

subscription_plan = sa.Enum("FREE", "PRO", name="subscriptionplan")
user_role = sa.Enum("ADMIN", "MEMBER", name="userrole")


def upgrade() -> None:
    op.create_table(
        "Tenant",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("subscription_plan", subscription_plan, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_Tenant_slug", "Tenant", ["slug"], unique=True)
    op.create_index("ix_Tenant_created_at", "Tenant", ["created_at"])

    op.create_table(
        "User",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["Tenant.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_User_email", "User", ["email"], unique=True)
    op.create_index("ix_User_tenant_id", "User", ["tenant_id"])
    op.create_index("ix_User_created_at", "User", ["created_at"])

    op.create_table(
        "Note",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["Tenant.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["User.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_Note_tenant_id", "Note", ["tenant_id"])
    op.create_index("ix_Note_user_id", "Note", ["user_id"])
    op.create_index("ix_Note_created_at", "Note", ["created_at"])


def downgrade() -> None:
    op.drop_table("Note")
    op.drop_table("User")
    op.drop_table("Tenant")
    subscription_plan.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
