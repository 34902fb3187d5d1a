"""Shared test fixtures — async SQLite in-memory DB + test client."""

import os
from collections.abc import AsyncGenerator

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

# Import all models so metadata is populated
import notesapp.models  # noqa: E402, F401
from notesapp.core.database import get_session  # noqa: E402
from notesapp.main import app  # noqa: E402
from notesapp.seed import DEMO_PASSWORD, seed_demo_data  # noqa: E402


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess
        await sess.rollback()


@pytest.fixture
async def tenants(session):
    """Demo tenants acme + globex with admin/member users and no notes.

    Returns {slug: tenant_id}.
    """
    created = await seed_demo_data(session, with_notes=False)
    return {slug: tenant.id for slug, tenant in created.items()}


@pytest.fixture
async def client(session) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client with DB session override."""

    async def _override_session():
        yield session

    app.dependency_overrides[get_session] = _override_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _login(client: AsyncClient, email: str, password: str = DEMO_PASSWORD) -> dict:
    """Helper: log in and return Authorization headers."""
    resp = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
async def acme_admin(client, tenants) -> dict:
    return await _login(client, "admin@acme.test")


@pytest.fixture
async def acme_member(client, tenants) -> dict:
    return await _login(client, "user@acme.test")


@pytest.fixture
async def globex_admin(client, tenants) -> dict:
    return await _login(client, "admin@globex.test")
