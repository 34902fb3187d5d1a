"""Identity resolution: verified user id → Principal."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.core.errors import NotFound
from notesapp.models.user import UserRole
from notesapp.stores.users import UserStore


class Principal:
    """Resolved identity carried through a request."""

    __slots__ = ("id", "email", "role", "tenant_id", "tenant_slug")

    def __init__(
        self,
        id: uuid.UUID,
        email: str,
        role: UserRole,
        tenant_id: uuid.UUID,
        tenant_slug: str,
    ) -> None:
        self.id = id
        self.email = email
        self.role = role
        self.tenant_id = tenant_id
        self.tenant_slug = tenant_slug

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"Principal(id={self.id}, role={self.role}, tenant={self.tenant_slug})"


async def resolve_principal(session: AsyncSession, user_id: uuid.UUID) -> Principal:
    """Build a Principal from one User→Tenant read.

    Raises NotFound if the user no longer exists and StoreUnavailable if the
    store cannot answer.
    """
    found = await UserStore(session).get_with_tenant(user_id)
    if found is None:
        raise NotFound("User not found")
    user, tenant = found
    return Principal(
        id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        tenant_slug=tenant.slug,
    )
