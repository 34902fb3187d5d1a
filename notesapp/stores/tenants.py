"""Tenant persistence."""

import uuid

from sqlmodel import select

from notesapp.models.base import utcnow
from notesapp.models.tenant import SubscriptionPlan, Tenant
from notesapp.stores.base import BaseStore, store_call


class TenantStore(BaseStore):
    async def get(self, tenant_id: uuid.UUID, *, for_update: bool = False) -> Tenant | None:
        """Fetch a tenant by id.

        With ``for_update`` the row stays locked until the session's
        transaction ends. SQLite ignores the clause; its engines take the
        write lock at BEGIN instead.
        """
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        if for_update:
            stmt = stmt.with_for_update()
        async with store_call("tenant.get"):
            result = await self.session.execute(stmt)
            return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Tenant | None:
        async with store_call("tenant.get_by_slug"):
            result = await self.session.execute(select(Tenant).where(Tenant.slug == slug))
            return result.scalar_one_or_none()

    async def set_plan(self, tenant: Tenant, plan: SubscriptionPlan) -> Tenant:
        async with store_call("tenant.set_plan"):
            if tenant.subscription_plan != plan:
                tenant.subscription_plan = plan
                tenant.updated_at = utcnow()
                self.session.add(tenant)
                await self.session.commit()
                await self.session.refresh(tenant)
            return tenant
