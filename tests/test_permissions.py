from types import SimpleNamespace

import pytest

from app.auth.permissions import (
    Role,
    can_moderate,
    has_role,
    is_admin,
    is_expert,
    is_verified_expert,
)


def _user(role, verified=False):
    return SimpleNamespace(role=role, isVerified=verified)


@pytest.mark.parametrize("role, required, expected", [
    ("USER", Role.USER, True),
    ("USER", Role.EXPERT, False),
    ("EXPERT", Role.EXPERT, True),
    ("EXPERT", Role.MODERATOR, False),
    ("MODERATOR", Role.EXPERT, True),
    ("ADMIN", Role.MODERATOR, True),
    ("SOMETHING_ELSE", Role.USER, True),
    ("SOMETHING_ELSE", Role.EXPERT, False),
])
def test_role_hierarchy(role, required, expected):
    assert has_role(_user(role), required) is expected


def test_expert_checks():
    assert is_expert(_user("EXPERT"))
    assert is_expert(_user("ADMIN"))
    assert not is_expert(_user("MODERATOR"))
    assert not is_verified_expert(_user("EXPERT"))
    assert is_verified_expert(_user("EXPERT", verified=True))


def test_moderation_and_admin():
    assert can_moderate(_user("MODERATOR"))
    assert can_moderate(_user("ADMIN"))
    assert not can_moderate(_user("EXPERT"))
    assert is_admin(_user("ADMIN"))
    assert not is_admin(_user("MODERATOR"))
