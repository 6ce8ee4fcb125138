# ---
# File: app/health/routes.py
# Purpose: Readiness endpoint reporting uptime and database connectivity
# ---

from fastapi import APIRouter, Depends
import time

from app.db import get_db

# Track when the server started (for uptime calculation)
START_TIME = time.time()

router = APIRouter(prefix="/api/health", tags=["Health"])


async def check_database(db) -> dict:
    """
    Database Health Check

    Runs a trivial query through the Prisma client. The probe never opens
    a connection itself; a disconnected client reports "error".
    """
    detail = {"status": "ok"}
    if not db.is_connected():
        return {"status": "error", "error": "Database client is not connected"}
    try:
        await db.query_raw("SELECT 1")
    except Exception as exc:
        detail["status"] = "error"
        detail["error"] = str(exc)
    return detail


@router.get("")
async def health(db=Depends(get_db)):
    """
    Readiness Endpoint

    Returns:
        - service: Application name
        - status: "ok" if the database answers, "degraded" otherwise
        - uptime_seconds: How long the server has been running
        - checks: Individual dependency status

    Always answers 200 while the process is up; callers read `status`.
    """
    db_status = await check_database(db)

    return {
        "service": "ponnect-api",
        "status": "ok" if db_status["status"] == "ok" else "degraded",
        "uptime_seconds": int(time.time() - START_TIME),
        "checks": {"database": db_status},
    }
