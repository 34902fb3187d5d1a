"""Tenant administration — plan upgrade."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from notesapp.api.deps import AdminAuth, Session
from notesapp.core.errors import Forbidden, NotFound
from notesapp.models.tenant import SubscriptionPlan, TenantRead
from notesapp.stores.tenants import TenantStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tenants", tags=["tenants"])


class UpgradeResponse(BaseModel):
    message: str
    tenant: TenantRead


@router.post("/{slug}/upgrade", response_model=UpgradeResponse)
async def upgrade_tenant(slug: str, auth: AdminAuth, session: Session) -> UpgradeResponse:
    """Move the caller's own tenant to the PRO plan. Idempotent."""
    if slug != auth.tenant_slug:
        raise Forbidden("Access denied")

    store = TenantStore(session)
    tenant = await store.get_by_slug(slug)
    if tenant is None:
        raise NotFound("Tenant not found")

    previous = tenant.subscription_plan
    tenant = await store.set_plan(tenant, SubscriptionPlan.PRO)
    if previous != SubscriptionPlan.PRO:
        logger.info("Tenant %s upgraded to PRO by %s", slug, auth.email)

    return UpgradeResponse(
        message="Subscription upgraded successfully",
        tenant=TenantRead.model_validate(tenant),
    )
