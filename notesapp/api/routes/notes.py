"""Notes CRUD — every single-note access is checked against the caller's tenant."""

import uuid

from fastapi import APIRouter, status
from pydantic import BaseModel

from notesapp.api.deps import Auth, Session
from notesapp.core.errors import Forbidden, InvalidInput, NotFound
from notesapp.models.note import Note, NoteCreate, NoteRead, NoteUpdate
from notesapp.services.identity import Principal
from notesapp.services.quota import create_note_within_quota
from notesapp.stores.notes import NoteStore

router = APIRouter(prefix="/notes", tags=["notes"])


class NoteEnvelope(BaseModel):
    note: NoteRead


class NoteListEnvelope(BaseModel):
    notes: list[NoteRead]


class MessageResponse(BaseModel):
    message: str


@router.get("", response_model=NoteListEnvelope)
async def list_notes(auth: Auth, session: Session) -> NoteListEnvelope:
    """All notes of the caller's tenant, newest first."""
    notes = await NoteStore(session).list_for_tenant(auth.tenant_id)
    return NoteListEnvelope(notes=[NoteRead.model_validate(n) for n in notes])


@router.post("", response_model=NoteEnvelope, status_code=status.HTTP_201_CREATED)
async def create_note(body: NoteCreate, auth: Auth, session: Session) -> NoteEnvelope:
    note = await create_note_within_quota(session, auth, body)
    return NoteEnvelope(note=NoteRead.model_validate(note))


@router.get("/{note_id}", response_model=NoteEnvelope)
async def get_note(note_id: str, auth: Auth, session: Session) -> NoteEnvelope:
    note = await _get_for_tenant(note_id, auth, NoteStore(session))
    return NoteEnvelope(note=NoteRead.model_validate(note))


@router.put("/{note_id}", response_model=NoteEnvelope)
async def update_note(
    note_id: str,
    body: NoteUpdate,
    auth: Auth,
    session: Session,
) -> NoteEnvelope:
    store = NoteStore(session)
    note = await _get_for_tenant(note_id, auth, store)

    changes = body.changes()
    if not changes:
        raise InvalidInput("No updates provided")

    note = await store.update(note, changes)
    return NoteEnvelope(note=NoteRead.model_validate(note))


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(note_id: str, auth: Auth, session: Session) -> MessageResponse:
    store = NoteStore(session)
    note = await _get_for_tenant(note_id, auth, store)
    await store.delete(note)
    return MessageResponse(message="Note deleted successfully")


# ── Internal helper ───────────────────────────────────────────

async def _get_for_tenant(raw_id: str, principal: Principal, store: NoteStore) -> Note:
    """Fetch a note, 404 if absent, 403 if it belongs to another tenant."""
    try:
        note_id = uuid.UUID(raw_id)
    except ValueError as exc:
        raise NotFound("Note not found") from exc

    note = await store.get(note_id)
    if note is None:
        raise NotFound("Note not found")
    if note.tenant_id != principal.tenant_id:
        raise Forbidden("Access denied")
    return note
