"""User model — belongs to exactly one tenant."""

import uuid
from enum import StrEnum

from sqlmodel import Field, SQLModel

from notesapp.models.base import ApiSchema, TimestampMixin, new_uuid
from notesapp.models.tenant import SubscriptionPlan


class UserRole(StrEnum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class User(TimestampMixin, SQLModel, table=True):
    __tablename__ = "User"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    tenant_id: uuid.UUID = Field(foreign_key="Tenant.id", nullable=False, index=True)
    email: str = Field(max_length=320, unique=True, nullable=False, index=True)
    password_hash: str = Field(nullable=False)
    role: UserRole = Field(default=UserRole.MEMBER)


# ── Pydantic schemas ─────────────────────────────────────────

class UserRead(ApiSchema):
    """User as seen by its own session, with tenant details folded in."""

    id: uuid.UUID
    email: str
    role: UserRole
    tenant_id: uuid.UUID
    tenant_slug: str
    tenant_name: str
    tenant_plan: SubscriptionPlan
