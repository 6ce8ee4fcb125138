# ---
# File: app/auth/dependencies.py
# Purpose: Resolve the current user from the session cookie and guard routes by authentication/role
# ---

import logging

from fastapi import Depends, HTTPException, Request, status
from jose import JWTError

from app import config
from app.auth.permissions import is_admin
from app.auth.security import decode_access_token
from app.db import get_db

logger = logging.getLogger(__name__)


# ---
# Look up the user behind the auth_token cookie.
# Returns None when there is no cookie, the token does not verify,
# or the user it names no longer exists.
# ---
async def get_current_user(request: Request, db=Depends(get_db)):
    token = request.cookies.get(config.AUTH_COOKIE_NAME)
    if not token:
        return None

    try:
        payload = decode_access_token(token)
    except JWTError as e:
        logger.info(f"[AUTH] Rejected session token: {e}")
        return None

    user_id = payload.get("userId")
    if not user_id:
        return None

    # Database errors propagate and answer 500 rather than a misleading 401
    return await db.user.find_unique(where={"id": user_id})


async def require_user(user=Depends(get_current_user)):
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user


async def require_admin(user=Depends(require_user)):
    if not is_admin(user):
        logger.warning(f"[AUTH] User {user.id} attempted an admin-only action")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user
