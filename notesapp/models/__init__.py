"""Import all models so SQLModel.metadata picks them up."""

from notesapp.models.note import Note, NoteCreate, NoteRead, NoteUpdate
from notesapp.models.tenant import SubscriptionPlan, Tenant, TenantRead
from notesapp.models.user import User, UserRead, UserRole

__all__ = [
    "Note",
    "NoteCreate",
    "NoteRead",
    "NoteUpdate",
    "SubscriptionPlan",
    "Tenant",
    "TenantRead",
    "User",
    "UserRead",
    "UserRole",
]
