"""Typed persistence layer over an AsyncSession."""

from notesapp.stores.base import store_call
from notesapp.stores.notes import NoteStore
from notesapp.stores.tenants import TenantStore
from notesapp.stores.users import UserStore

__all__ = ["NoteStore", "TenantStore", "UserStore", "store_call"]
