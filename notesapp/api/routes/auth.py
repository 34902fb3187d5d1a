"""Authentication endpoints — login + current user."""

import logging

from fastapi import APIRouter
from pydantic import BaseModel

from notesapp.api.deps import Auth, Session
from notesapp.core.errors import InvalidInput, Unauthorized
from notesapp.core.security import issue_token, verify_password
from notesapp.models.tenant import Tenant
from notesapp.models.user import User, UserRead
from notesapp.stores.users import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


# ── Schemas ──────────────────────────────────────────────────

class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    token: str
    user: UserRead


class MeResponse(BaseModel):
    user: UserRead


def _to_read(user: User, tenant: Tenant) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        role=user.role,
        tenant_id=user.tenant_id,
        tenant_slug=tenant.slug,
        tenant_name=tenant.name,
        tenant_plan=tenant.subscription_plan,
    )


# ── Routes ───────────────────────────────────────────────────

@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, session: Session) -> LoginResponse:
    """Authenticate with email + password, receive a bearer token."""
    email = body.email.strip()
    if not email or not body.password:
        raise InvalidInput("Email and password are required")

    found = await UserStore(session).get_by_email_with_tenant(email)

    # Same answer for unknown email and wrong password
    if found is None or not verify_password(body.password, found[0].password_hash):
        logger.info("Failed login attempt for %s", email)
        raise Unauthorized("Invalid email or password")

    user, tenant = found
    return LoginResponse(token=issue_token(user.id), user=_to_read(user, tenant))


@router.get("/me", response_model=MeResponse)
async def get_me(auth: Auth, session: Session) -> MeResponse:
    """Return the current user with fresh tenant details."""
    found = await UserStore(session).get_with_tenant(auth.id)
    if found is None:
        raise Unauthorized()
    return MeResponse(user=_to_read(*found))
