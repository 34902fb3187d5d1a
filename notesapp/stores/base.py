"""Shared plumbing for the typed stores."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.core.config import get_settings
from notesapp.core.errors import StoreUnavailable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_call(operation: str) -> AsyncIterator[None]:
    """Bound a store round-trip and translate driver failures.

    Timeouts, connection errors and SQLAlchemy errors all surface as
    StoreUnavailable so callers never see raw backend exceptions.
    """
    timeout = get_settings().store_timeout_seconds
    try:
        async with asyncio.timeout(timeout):
            yield
    except TimeoutError as exc:
        logger.error("Store call %s timed out after %.1fs", operation, timeout)
        raise StoreUnavailable() from exc
    except (SQLAlchemyError, OSError) as exc:
        logger.exception("Store call %s failed", operation)
        raise StoreUnavailable() from exc


class BaseStore:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
