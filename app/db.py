# ---
# File: app/db.py
# Purpose: Creates and exposes the Prisma client used for database operations
# ---

import logging
from typing import Optional

from app import config

logger = logging.getLogger(__name__)

_client = None


# ---
# Build a new Prisma client. Scripts pass an explicit sqlite URL
# (e.g. "file:/abs/path/dev.db") to bypass DATABASE_URL.
# The generated client only exists after `prisma generate`, hence the local import.
# ---
def create_client(url: Optional[str] = None):
    from prisma import Prisma

    if url:
        return Prisma(datasource={"url": url})
    return Prisma(datasource={"url": config.DATABASE_URL})


# ---
# Return the process-wide client, creating it on first use.
# ---
def get_client():
    global _client
    if _client is None:
        _client = create_client()
    return _client


# ---
# FastAPI dependency handing the shared client to route handlers.
# Tests replace it through app.dependency_overrides.
# ---
async def get_db():
    return get_client()


async def connect() -> None:
    client = get_client()
    if not client.is_connected():
        await client.connect()
        logger.info("[DB] Connected to %s", config.DATABASE_URL)


async def disconnect() -> None:
    global _client
    if _client is not None and _client.is_connected():
        await _client.disconnect()
        logger.info("[DB] Disconnected")
    _client = None
