# ---
# File: app/auth/permissions.py
# Purpose: Role and expert-type constants plus role checks for authenticated users
# ---

from enum import Enum


class Role(str, Enum):
    USER = "USER"
    EXPERT = "EXPERT"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class ExpertType(str, Enum):
    VET = "VET"
    TRAINER = "TRAINER"
    NUTRITIONIST = "NUTRITIONIST"
    BEHAVIORIST = "BEHAVIORIST"


ROLE_HIERARCHY = {
    Role.USER: 0,
    Role.EXPERT: 1,
    Role.MODERATOR: 2,
    Role.ADMIN: 3,
}


def _level(role) -> int:
    try:
        return ROLE_HIERARCHY[Role(role)]
    except ValueError:
        # Unknown roles rank as plain users
        return 0


def has_role(user, required_role: Role) -> bool:
    """True when the user's role ranks at or above ``required_role``."""
    return _level(user.role) >= ROLE_HIERARCHY[Role(required_role)]


def is_expert(user) -> bool:
    return user.role in (Role.EXPERT.value, Role.ADMIN.value)


def is_verified_expert(user) -> bool:
    return is_expert(user) and bool(user.isVerified)


def can_moderate(user) -> bool:
    return has_role(user, Role.MODERATOR)


def is_admin(user) -> bool:
    return user.role == Role.ADMIN.value
