"""Note model — text owned by a user, scoped to the user's tenant."""

import uuid
from datetime import datetime

from sqlmodel import Field, SQLModel

from notesapp.models.base import ApiSchema, TimestampMixin, new_uuid


class Note(TimestampMixin, SQLModel, table=True):
    __tablename__ = "Note"

    id: uuid.UUID = Field(default_factory=new_uuid, primary_key=True)
    title: str = Field(max_length=255, nullable=False)
    content: str = Field(nullable=False)
    tenant_id: uuid.UUID = Field(foreign_key="Tenant.id", nullable=False, index=True)
    user_id: uuid.UUID = Field(foreign_key="User.id", nullable=False, index=True)


# ── Pydantic schemas ─────────────────────────────────────────

class NoteCreate(SQLModel):
    # Emptiness is checked by the quota service so the error is a 400
    title: str = Field(default="", max_length=255)
    content: str = ""


class NoteUpdate(SQLModel):
    title: str | None = Field(default=None, max_length=255)
    content: str | None = None

    def changes(self) -> dict[str, str]:
        """Fields the client actually supplied. Empty strings count as absent."""
        return {
            field: value
            for field, value in (("title", self.title), ("content", self.content))
            if value
        }


class NoteRead(ApiSchema):
    id: uuid.UUID
    title: str
    content: str
    tenant_id: uuid.UUID
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime
