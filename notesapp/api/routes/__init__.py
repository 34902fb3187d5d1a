"""API router aggregation."""

from fastapi import APIRouter

from notesapp.api.routes.auth import router as auth_router
from notesapp.api.routes.health import router as health_router
from notesapp.api.routes.notes import router as notes_router
from notesapp.api.routes.tenants import router as tenants_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(notes_router)
api_router.include_router(tenants_router)
api_router.include_router(health_router)
