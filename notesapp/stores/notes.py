"""Note persistence — every query here is tenant-agnostic; callers scope."""

import uuid
from collections.abc import Sequence

from sqlalchemy import func
from sqlmodel import select

from notesapp.models.base import utcnow
from notesapp.models.note import Note
from notesapp.stores.base import BaseStore, store_call


class NoteStore(BaseStore):
    async def get(self, note_id: uuid.UUID) -> Note | None:
        async with store_call("note.get"):
            return await self.session.get(Note, note_id)

    async def list_for_tenant(self, tenant_id: uuid.UUID) -> Sequence[Note]:
        stmt = (
            select(Note)
            .where(Note.tenant_id == tenant_id)
            .order_by(Note.created_at.desc())  # type: ignore[attr-defined]
        )
        async with store_call("note.list"):
            result = await self.session.execute(stmt)
            return result.scalars().all()

    async def count_for_tenant(self, tenant_id: uuid.UUID) -> int:
        stmt = select(func.count()).select_from(Note).where(Note.tenant_id == tenant_id)
        async with store_call("note.count"):
            return (await self.session.execute(stmt)).scalar_one()

    async def create(self, note: Note) -> Note:
        """Insert and commit, closing whatever transaction the session holds."""
        async with store_call("note.create"):
            self.session.add(note)
            await self.session.commit()
            await self.session.refresh(note)
            return note

    async def update(self, note: Note, changes: dict[str, str]) -> Note:
        async with store_call("note.update"):
            for field, value in changes.items():
                setattr(note, field, value)
            note.updated_at = utcnow()
            self.session.add(note)
            await self.session.commit()
            await self.session.refresh(note)
            return note

    async def delete(self, note: Note) -> None:
        async with store_call("note.delete"):
            await self.session.delete(note)
            await self.session.commit()
