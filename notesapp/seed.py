"""Seed the database with the two demo tenants.

Usage::

    python -m notesapp.seed [--no-notes]
"""

import argparse
import asyncio
import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from notesapp.core.config import get_settings
from notesapp.core.database import connect
from notesapp.core.logging import configure_logging
from notesapp.core.security import hash_password
from notesapp.models.note import Note
from notesapp.models.tenant import SubscriptionPlan, Tenant
from notesapp.models.user import User, UserRole

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

DEMO_TENANTS = (
    ("Acme Corporation", "acme"),
    ("Globex Corporation", "globex"),
)


async def seed_demo_data(session: AsyncSession, *, with_notes: bool = True) -> dict[str, Tenant]:
    """Wipe all rows and insert the demo tenants, users and notes.

    Returns the created tenants keyed by slug.
    """
    for model in (Note, User, Tenant):
        await session.execute(delete(model))

    password_hash = hash_password(DEMO_PASSWORD)
    tenants: dict[str, Tenant] = {}

    for name, slug in DEMO_TENANTS:
        tenant = Tenant(name=name, slug=slug, subscription_plan=SubscriptionPlan.FREE)
        session.add(tenant)
        await session.flush()  # populate tenant.id
        tenants[slug] = tenant

        admin = User(
            tenant_id=tenant.id,
            email=f"admin@{slug}.test",
            password_hash=password_hash,
            role=UserRole.ADMIN,
        )
        member = User(
            tenant_id=tenant.id,
            email=f"user@{slug}.test",
            password_hash=password_hash,
            role=UserRole.MEMBER,
        )
        session.add_all([admin, member])
        await session.flush()

        if with_notes:
            session.add(Note(
                title=f"Welcome to {name.split()[0]} Notes",
                content=f"This is a sample note for {name}.",
                tenant_id=tenant.id,
                user_id=admin.id,
            ))

    await session.commit()
    return tenants


async def _main(with_notes: bool) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    db = await connect(settings)
    try:
        await db.create_all()
        async with db.session_factory() as session:
            tenants = await seed_demo_data(session, with_notes=with_notes)
        logger.info("Seeded tenants: %s", ", ".join(sorted(tenants)))
    finally:
        await db.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed demo tenants, users and notes")
    parser.add_argument("--no-notes", action="store_true", help="skip the welcome notes")
    args = parser.parse_args()
    asyncio.run(_main(with_notes=not args.no_notes))


if __name__ == "__main__":
    main()
