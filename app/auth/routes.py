# ---
# File: auth/routes.py
# Purpose: FastAPI routes for registration, cookie-based login/logout and current-user retrieval
# ---

from fastapi import APIRouter, Depends, HTTPException, Response, status
import logging

from app import config
from app.auth.dependencies import require_user
from app.auth.models import LoginRequest, PublicUser, RegisterRequest
from app.auth.permissions import Role
from app.auth.security import create_access_token, hash_password, verify_password
from app.db import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

MIN_PASSWORD_LENGTH = 8
SESSION_MAX_AGE = 60 * 60 * 24 * config.JWT_EXPIRE_DAYS

# ---
# Create a plain USER account.
# Email is stored lower-cased; duplicate emails are rejected with 409.
# ---
@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, db=Depends(get_db)):
    if len(data.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(status_code=400, detail="Password must be at least 8 characters")

    email = data.email.lower()
    try:
        logger.info(f"[REGISTER] Received registration request for {email}")
        existing = await db.user.find_unique(where={"email": email})
    except Exception as e:
        logger.error(f"[REGISTER][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred during registration")

    if existing:
        logger.warning(f"[REGISTER] Email {email} already registered")
        raise HTTPException(status_code=409, detail="An account with this email already exists")

    try:
        user = await db.user.create(data={
            "email": email,
            "passwordHash": hash_password(data.password),
            "name": data.name,
            "location": data.location or None,
            "role": Role.USER.value,
            "isVerified": False,
            "isEmailVerified": False,
        })
    except Exception as e:
        logger.error(f"[REGISTER][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred during registration")

    logger.info(f"[REGISTER] User {email} successfully created")
    return {
        "success": True,
        "data": PublicUser.model_validate(user),
        "message": "Account created successfully. Please verify your email.",
    }

# ---
# Verify credentials and start a session.
# The signed token is stored in an httpOnly cookie valid for JWT_EXPIRE_DAYS.
# ---
@router.post("/login")
async def login(data: LoginRequest, response: Response, db=Depends(get_db)):
    email = data.email.lower()
    try:
        logger.info(f"[LOGIN] Received login request for {email}")
        user = await db.user.find_unique(where={"email": email})
    except Exception as e:
        logger.error(f"[LOGIN][ERROR] {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="An error occurred during login")

    if not user or not verify_password(data.password, user.passwordHash):
        logger.warning(f"[LOGIN] Invalid credentials for {email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")

    response.set_cookie(
        key=config.AUTH_COOKIE_NAME,
        value=create_access_token(user),
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="lax",
        max_age=SESSION_MAX_AGE,
        path="/",
    )

    logger.info(f"[LOGIN] User {email} successfully authenticated")
    return {
        "success": True,
        "data": PublicUser.model_validate(user),
        "message": "Login successful",
    }


@router.post("/logout")
async def logout(response: Response):
    response.delete_cookie(key=config.AUTH_COOKIE_NAME, path="/")
    return {"success": True, "message": "Logged out"}


@router.get("/me")
async def me(user=Depends(require_user)):
    return {"success": True, "data": PublicUser.model_validate(user)}
