"""FastAPI application entrypoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notesapp.api.routes import api_router
from notesapp.core.config import get_settings
from notesapp.core.database import connect
from notesapp.core.errors import register_exception_handlers
from notesapp.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not configured")

    # Startup: one validated store handle for the whole process
    db = await connect(settings)
    await db.create_all()  # use Alembic in production
    app.state.db = db
    logger.info("Notes API started (%s)", settings.environment)
    yield
    await db.dispose()


app = FastAPI(
    title="Notes",
    version="0.1.0",
    description="Multi-tenant notes API with per-tenant subscription plans",
    lifespan=lifespan,
)

register_exception_handlers(app)

# ── CORS ─────────────────────────────────────────────────────
_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _settings.allowed_origins.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── API routes ───────────────────────────────────────────────
app.include_router(api_router)
