"""FastAPI dependencies for authentication and authorization."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.core.database import get_session
from notesapp.core.errors import Forbidden, InvalidToken, NotFound, Unauthorized
from notesapp.core.security import verify_token
from notesapp.services.identity import Principal, resolve_principal

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must be a 401 from us, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


async def require_auth(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Principal:
    """Resolve ``Authorization: Bearer <token>`` to a Principal.

    StoreUnavailable is left to propagate as a 500.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    try:
        user_id = verify_token(credentials.credentials)
        return await resolve_principal(session, user_id)
    except InvalidToken as exc:
        logger.debug("Rejected bearer token: %s", exc)
        raise Unauthorized() from exc
    except NotFound as exc:
        raise Unauthorized() from exc


async def require_admin(
    principal: Annotated[Principal, Depends(require_auth)],
) -> Principal:
    """Authenticate first, then require the ADMIN role."""
    if not principal.is_admin:
        raise Forbidden("Admin access required")
    return principal


# Typed shorthand for use in route signatures
Auth = Annotated[Principal, Depends(require_auth)]
AdminAuth = Annotated[Principal, Depends(require_admin)]
Session = Annotated[AsyncSession, Depends(get_session)]
