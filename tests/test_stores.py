"""Tests for store timeouts and error translation."""

import asyncio

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from notesapp.core.config import get_settings
from notesapp.core.errors import StoreUnavailable
from notesapp.stores.base import store_call
from notesapp.stores.notes import NoteStore


@pytest.mark.asyncio
async def test_store_call_timeout_is_store_unavailable(monkeypatch):
    monkeypatch.setattr(get_settings(), "store_timeout_seconds", 0.01)

    with pytest.raises(StoreUnavailable):
        async with store_call("slow"):
            await asyncio.sleep(1)


@pytest.mark.asyncio
async def test_store_call_translates_driver_errors():
    with pytest.raises(StoreUnavailable) as info:
        async with store_call("broken"):
            raise OperationalError("SELECT 1", {}, Exception("server closed the connection"))
    assert "server closed" not in info.value.message


@pytest.mark.asyncio
async def test_store_call_passes_through_other_errors():
    with pytest.raises(KeyError):
        async with store_call("noop"):
            raise KeyError("x")


@pytest.mark.asyncio
async def test_stalled_store_surfaces_as_500(client: AsyncClient, acme_admin, monkeypatch):
    """A hung store is a server error, not a 404 or 401."""

    async def _hang(self, tenant_id):
        # Shrink the bound only once authentication is done
        monkeypatch.setattr(get_settings(), "store_timeout_seconds", 0.01)
        async with store_call("note.list"):
            await asyncio.sleep(1)

    monkeypatch.setattr(NoteStore, "list_for_tenant", _hang)

    resp = await client.get("/api/notes", headers=acme_admin)
    assert resp.status_code == 500
    assert resp.json()["code"] == "STORE_UNAVAILABLE"
