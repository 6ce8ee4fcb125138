# ---
# File: scripts/reset_password.py
# Purpose: Reset a (test) user's password directly in the sqlite database
# Usage:   python -m scripts.reset_password [--email EMAIL] [--password PASSWORD] [--db prisma/dev.db]
# ---

import argparse
import asyncio
import sys
from pathlib import Path

from app import config
from app.auth.security import hash_password
from app.db import create_client


async def reset_password(db, email: str, new_password: str):
    """Store a bcrypt hash of ``new_password`` for ``email``; returns the updated user or None."""
    user = await db.user.update(
        where={"email": email},
        data={"passwordHash": hash_password(new_password)},
    )
    if user is None:
        print(f"User not found: {email}")
        return None

    print("\n=== Password Reset Complete ===")
    print(f"User: {user.name}")
    print(f"Email: {user.email}")
    print(f"Role: {user.role}")
    print(f"Expert Type: {user.expertType}")
    print(f"Is Verified: {user.isVerified}")
    print(f"New password: {new_password}")
    return user


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Reset a user's password")
    parser.add_argument("--email", default=config.MAINTENANCE_EMAIL)
    parser.add_argument("--password", default="password")
    parser.add_argument("--db", type=Path, default=config.default_database_file())
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    args = parse_args(argv)
    db = create_client(f"file:{args.db.resolve()}")
    await db.connect()
    try:
        user = await reset_password(db, args.email, args.password)
    finally:
        await db.disconnect()
    return 0 if user else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
