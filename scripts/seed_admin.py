# ---
# File: scripts/seed_admin.py
# Purpose: Create the platform admin account, or promote an existing user to ADMIN
# Usage:   python -m scripts.seed_admin [--email EMAIL] [--password PASSWORD] [--db prisma/dev.db]
# ---

import argparse
import asyncio
from pathlib import Path

from app import config
from app.auth.permissions import Role
from app.auth.security import hash_password
from app.db import create_client

DEFAULT_ADMIN_EMAIL = "admin@ponnect.com.au"
DEFAULT_ADMIN_PASSWORD = "Admin123!"


async def seed_admin(db, email: str = DEFAULT_ADMIN_EMAIL, password: str = DEFAULT_ADMIN_PASSWORD):
    """Find-or-create the admin by email.

    An existing user keeps their password and is promoted to a verified ADMIN.
    Returns the admin record.
    """
    existing = await db.user.find_unique(where={"email": email})

    if existing:
        if existing.role != Role.ADMIN.value:
            admin = await db.user.update(
                where={"email": email},
                data={"role": Role.ADMIN.value, "isVerified": True},
            )
            print("Updated existing user to ADMIN role")
        else:
            admin = existing
            print("Admin user already exists")
    else:
        admin = await db.user.create(data={
            "name": "Admin User",
            "email": email,
            "passwordHash": hash_password(password),
            "role": Role.ADMIN.value,
            "isVerified": True,
            "location": "Brisbane, QLD",
            "bio": "Platform administrator",
        })
        print("Created new admin user")

    print("")
    print("========================================")
    print("Admin Login Credentials:")
    print(f"   Email:    {email}")
    if existing:
        print("   Password: (unchanged)")
    else:
        print(f"   Password: {password}")
    print("========================================")
    return admin


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create or promote the platform admin")
    parser.add_argument("--email", default=DEFAULT_ADMIN_EMAIL)
    parser.add_argument("--password", default=DEFAULT_ADMIN_PASSWORD)
    parser.add_argument("--db", type=Path, default=config.default_database_file())
    return parser.parse_args(argv)


async def main(argv=None):
    args = parse_args(argv)
    db = create_client(f"file:{args.db.resolve()}")
    await db.connect()
    try:
        await seed_admin(db, args.email, args.password)
    finally:
        await db.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
