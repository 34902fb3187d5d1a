"""Tenant model — top-level isolation boundary."""

import uuid
from enum import StrEnum

from sqlmodel import Field, SQLModel

from notesapp.models.base import ApiSchema, TimestampMixin, new_uuid


class SubscriptionPlan(StrEnum):
    FREE = "FREE"
    PRO = "PRO"


class Tenant(TimestampMixin, SQLModel, table=True):
    __tablename__ = "Tenant"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    slug: str = Field(max_length=100, unique=True, nullable=False, index=True)
    subscription_plan: SubscriptionPlan = Field(default=SubscriptionPlan.FREE)


# ── Pydantic schemas ─────────────────────────────────────────

class TenantRead(ApiSchema):
    id: uuid.UUID
    name: str
    slug: str
    subscription_plan: SubscriptionPlan
