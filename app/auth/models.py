from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    name: str
    location: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


# Fields of a user that are safe to return to clients (no passwordHash)
class PublicUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    avatar: Optional[str] = None
    role: str
    expertType: Optional[str] = None
    credentials: Optional[str] = None
    isVerified: bool = False
    isEmailVerified: bool = False
    createdAt: Optional[datetime] = None
