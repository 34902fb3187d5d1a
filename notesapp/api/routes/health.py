"""Health endpoint — reports store connectivity, never fails itself."""

import asyncio
import time
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.api.deps import Session
from notesapp.core.config import get_settings
from notesapp.models.base import ApiSchema

router = APIRouter(tags=["system"])


class ServiceHealth(ApiSchema):
    status: str  # "ok" or "error"
    detail: str | None = None
    latency_ms: int | None = None


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    environment: str
    database: ServiceHealth


@router.get("/health", response_model=HealthResponse)
async def health(session: Session) -> HealthResponse:
    settings = get_settings()
    db = await _check_database(session, settings.store_timeout_seconds)
    return HealthResponse(
        status="ok" if db.status == "ok" else "degraded",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        database=db,
    )


async def _check_database(session: AsyncSession, timeout: float) -> ServiceHealth:
    try:
        t0 = time.monotonic()
        async with asyncio.timeout(timeout):
            await session.execute(text("SELECT 1"))
        latency = int((time.monotonic() - t0) * 1000)
        return ServiceHealth(status="ok", latency_ms=latency)
    except TimeoutError:
        return ServiceHealth(status="error", detail=f"timed out after {timeout}s")
    except Exception as exc:
        # Health must answer 200 whatever the backend does
        return ServiceHealth(status="error", detail=type(exc).__name__)
