# ---
# File: app/auth/security.py
# Purpose: Password hashing with bcrypt and signing/verification of session JWTs
# ---

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt
from passlib.context import CryptContext

from app import config

# Initialize the password hashing context using bcrypt (cost 12)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)

# ---
# Hash a plain text password using bcrypt.
# Returns the hashed password as a string for secure storage.
# ---
def hash_password(password: str) -> str:
    return pwd_context.hash(password)

# ---
# Verify a plain text password against a previously hashed password.
# Returns True if the password matches, False otherwise.
# ---
def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

# ---
# Sign a session token for a user record.
# Claims: userId, email, role, iat and exp (JWT_EXPIRE_DAYS from now).
# ---
def create_access_token(user) -> str:
    now = datetime.now(tz=timezone.utc)
    claims: Dict[str, Any] = {
        "userId": user.id,
        "email": user.email,
        "role": user.role,
        "iat": now,
        "exp": now + timedelta(days=config.JWT_EXPIRE_DAYS),
    }
    return jwt.encode(claims, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)

# ---
# Decode and validate a session token.
# Raises jose.JWTError when the signature is wrong or the token expired.
# ---
def decode_access_token(token: str) -> Dict[str, Any]:
    return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
