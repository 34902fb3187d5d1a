"""User persistence. Users are read-only at request time."""

import uuid

from sqlmodel import select

from notesapp.models.tenant import Tenant
from notesapp.models.user import User
from notesapp.stores.base import BaseStore, store_call


class UserStore(BaseStore):
    async def get_with_tenant(self, user_id: uuid.UUID) -> tuple[User, Tenant] | None:
        """Load a user and its tenant in a single joined query."""
        stmt = (
            select(User, Tenant)
            .join(Tenant, User.tenant_id == Tenant.id)  # type: ignore[arg-type]
            .where(User.id == user_id)
        )
        async with store_call("user.get_with_tenant"):
            row = (await self.session.execute(stmt)).first()
        return (row[0], row[1]) if row else None

    async def get_by_email_with_tenant(self, email: str) -> tuple[User, Tenant] | None:
        stmt = (
            select(User, Tenant)
            .join(Tenant, User.tenant_id == Tenant.id)  # type: ignore[arg-type]
            .where(User.email == email)
        )
        async with store_call("user.get_by_email"):
            row = (await self.session.execute(stmt)).first()
        return (row[0], row[1]) if row else None
