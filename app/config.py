# ---
# File: app/config.py
# Purpose: Environment-driven settings shared by the API and the maintenance scripts
# ---

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ---
# Application
# ---
APP_ENV = os.environ.get("APP_ENV", "development")
PORT = int(os.environ.get("PORT", "8000"))

cors_env = os.environ.get("CORS_ALLOW_ORIGINS", "")
CORS_ALLOW_ORIGINS = [origin.strip() for origin in cors_env.split(",") if origin.strip()]

# ---
# Database
# ---
# Relative sqlite paths resolve against the prisma/ directory, same as the schema.
DATABASE_URL = os.environ.get("DATABASE_URL", "file:./dev.db")

# ---
# Sessions
# ---
JWT_SECRET = os.environ.get("JWT_SECRET", "ponnect-secret-key-change-in-production")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
JWT_EXPIRE_DAYS = int(os.environ.get("JWT_EXPIRE_DAYS", "7"))
AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "auth_token")
COOKIE_SECURE = APP_ENV == "production"

# ---
# Maintenance scripts
# ---
MAINTENANCE_EMAIL = os.environ.get("MAINTENANCE_EMAIL", "test_unique_subagent_2@example.com")


def default_database_file() -> Path:
    """Path of the development sqlite file the maintenance scripts operate on."""
    return Path.cwd() / "prisma" / "dev.db"
