"""Plan limit enforcement on the note creation path."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.core.config import get_settings
from notesapp.core.errors import InvalidInput, NotFound, QuotaExceeded
from notesapp.models.note import Note, NoteCreate
from notesapp.models.tenant import SubscriptionPlan
from notesapp.services.identity import Principal
from notesapp.stores.notes import NoteStore
from notesapp.stores.tenants import TenantStore

logger = logging.getLogger(__name__)


async def create_note_within_quota(
    session: AsyncSession, principal: Principal, body: NoteCreate
) -> Note:
    """Create a note for the principal's tenant unless the plan forbids it.

    Plan read, count and insert share one transaction. The tenant row is
    locked FOR UPDATE on PostgreSQL; on SQLite the transaction already holds
    the database write lock (see ``use_immediate_transactions``).
    """
    if not body.title or not body.content:
        raise InvalidInput("Title and content are required")

    tenants = TenantStore(session)
    notes = NoteStore(session)

    tenant = await tenants.get(principal.tenant_id, for_update=True)
    if tenant is None:
        raise NotFound("Tenant not found")

    if tenant.subscription_plan == SubscriptionPlan.FREE:
        limit = get_settings().free_plan_note_limit
        count = await notes.count_for_tenant(tenant.id)
        if count >= limit:
            # The row lock is released when the request session closes
            logger.info("Tenant %s hit the free plan limit (%d notes)", tenant.slug, count)
            raise QuotaExceeded()

    note = Note(
        title=body.title,
        content=body.content,
        tenant_id=principal.tenant_id,
        user_id=principal.id,
    )
    return await notes.create(note)
