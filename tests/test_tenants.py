"""Tests for the tenant plan upgrade endpoint."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_admin_upgrades_own_tenant(client: AsyncClient, acme_admin, tenants):
    resp = await client.post("/api/tenants/acme/upgrade", headers=acme_admin)
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Subscription upgraded successfully"
    assert data["tenant"] == {
        "id": str(tenants["acme"]),
        "name": "Acme Corporation",
        "slug": "acme",
        "subscriptionPlan": "PRO",
    }


@pytest.mark.asyncio
async def test_upgrade_is_idempotent(client: AsyncClient, acme_admin):
    first = await client.post("/api/tenants/acme/upgrade", headers=acme_admin)
    second = await client.post("/api/tenants/acme/upgrade", headers=acme_admin)
    assert first.status_code == second.status_code == 200
    assert second.json()["tenant"]["subscriptionPlan"] == "PRO"


@pytest.mark.asyncio
async def test_admin_cannot_upgrade_other_tenant(client: AsyncClient, acme_admin, globex_admin):
    resp = await client.post("/api/tenants/globex/upgrade", headers=acme_admin)
    assert resp.status_code == 403
    assert resp.json()["code"] == "FORBIDDEN"

    # globex untouched
    resp = await client.get("/api/auth/me", headers=globex_admin)
    assert resp.json()["user"]["tenantPlan"] == "FREE"


@pytest.mark.asyncio
async def test_unknown_slug_forbidden(client: AsyncClient, acme_admin):
    resp = await client.post("/api/tenants/initech/upgrade", headers=acme_admin)
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_member_cannot_upgrade(client: AsyncClient, acme_member):
    resp = await client.post("/api/tenants/acme/upgrade", headers=acme_member)
    assert resp.status_code == 403

    resp = await client.get("/api/auth/me", headers=acme_member)
    assert resp.json()["user"]["tenantPlan"] == "FREE"


@pytest.mark.asyncio
async def test_upgrade_lifts_note_limit(client: AsyncClient, acme_admin, acme_member):
    for _ in range(3):
        await client.post("/api/notes", json={"title": "a", "content": "b"}, headers=acme_member)
    resp = await client.post("/api/notes", json={"title": "a", "content": "b"}, headers=acme_member)
    assert resp.status_code == 403

    await client.post("/api/tenants/acme/upgrade", headers=acme_admin)

    resp = await client.post("/api/notes", json={"title": "a", "content": "b"}, headers=acme_member)
    assert resp.status_code == 201
