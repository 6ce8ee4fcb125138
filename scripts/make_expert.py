# ---
# File: scripts/make_expert.py
# Purpose: Promote a (test) user to a verified expert directly in the sqlite database
# Usage:   python -m scripts.make_expert [--email EMAIL] [--expert-type VET] [--db prisma/dev.db]
# ---

import argparse
import asyncio
from pathlib import Path

from app import config
from app.auth.permissions import ExpertType, Role, is_verified_expert
from app.db import create_client


async def make_expert(db, email: str, expert_type: str = ExpertType.VET.value):
    """Set role=EXPERT, expertType and isVerified on every user with ``email``.

    Returns the number of updated rows and the user as stored afterwards
    (None when no user has that email).
    """
    count = await db.user.update_many(
        where={"email": email},
        data={
            "role": Role.EXPERT.value,
            "expertType": expert_type,
            "isVerified": True,
        },
    )
    print(f"Updated users: {count}")

    user = await db.user.find_first(where={"email": email})
    if user:
        print("User details:")
        print(f"  id:          {user.id}")
        print(f"  name:        {user.name}")
        print(f"  email:       {user.email}")
        print(f"  role:        {user.role}")
        print(f"  expertType:  {user.expertType}")
        print(f"  isVerified:  {user.isVerified}")
        print(f"  verified expert: {is_verified_expert(user)}")
    else:
        print(f"No user found with email {email}")
    return count, user


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Promote a user to verified expert")
    parser.add_argument("--email", default=config.MAINTENANCE_EMAIL)
    parser.add_argument(
        "--expert-type",
        default=ExpertType.VET.value,
        choices=[t.value for t in ExpertType],
    )
    parser.add_argument("--db", type=Path, default=config.default_database_file())
    return parser.parse_args(argv)


async def main(argv=None):
    args = parse_args(argv)
    db = create_client(f"file:{args.db.resolve()}")
    await db.connect()
    try:
        await make_expert(db, args.email, args.expert_type)
    finally:
        await db.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
