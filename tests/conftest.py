import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field

from app import config
from app.auth.security import create_access_token
from app.db import get_db
from app.main import app as fastapi_app


def _id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


# Records shaped like the models generated from prisma/schema.prisma
class User(BaseModel):
    id: str = Field(default_factory=_id)
    email: str
    passwordHash: str = "not-a-real-hash"
    name: str
    bio: Optional[str] = None
    location: Optional[str] = None
    avatar: Optional[str] = None
    role: str = "USER"
    expertType: Optional[str] = None
    credentials: Optional[str] = None
    isVerified: bool = False
    isEmailVerified: bool = False
    createdAt: datetime = Field(default_factory=_now)
    updatedAt: datetime = Field(default_factory=_now)


class ForumCategory(BaseModel):
    id: str = Field(default_factory=_id)
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    order: int = 0
    posts: Optional[list] = None


class ForumPost(BaseModel):
    id: str = Field(default_factory=_id)
    title: str
    content: str = ""
    authorId: str
    categoryId: str
    createdAt: datetime = Field(default_factory=_now)


class Notification(BaseModel):
    id: str = Field(default_factory=_id)
    userId: str
    type: str
    title: str
    message: str
    link: Optional[str] = None
    isRead: bool = False
    createdAt: datetime = Field(default_factory=_now)


class FakeTable:
    """In-memory stand-in for one Prisma model accessor (db.user, db.notification, ...)."""

    def __init__(self, model):
        self.model = model
        self.records = []
        self.fail = False
        self.calls = []

    def _check(self, action):
        self.calls.append(action)
        if self.fail:
            raise RuntimeError("database is locked")

    @staticmethod
    def _matches(record, where):
        return all(getattr(record, key) == value for key, value in (where or {}).items())

    def _find(self, where):
        return next((r for r in self.records if self._matches(r, where)), None)

    async def find_many(self, where=None, order=None, skip=None, take=None, include=None):
        self._check("find_many")
        rows = [r for r in self.records if self._matches(r, where)]
        if order:
            (key, direction), = order.items()
            rows.sort(key=lambda r: getattr(r, key), reverse=direction == "desc")
        if skip:
            rows = rows[skip:]
        if take is not None:
            rows = rows[:take]
        return [r.model_copy() for r in rows]

    async def find_first(self, where=None):
        self._check("find_first")
        found = self._find(where)
        return found.model_copy() if found else None

    async def find_unique(self, where):
        self._check("find_unique")
        found = self._find(where)
        return found.model_copy() if found else None

    async def count(self, where=None):
        self._check("count")
        return sum(1 for r in self.records if self._matches(r, where))

    async def create(self, data):
        self._check("create")
        record = self.model(**data)
        self.records.append(record)
        return record.model_copy()

    async def update(self, where, data):
        self._check("update")
        found = self._find(where)
        if found is None:
            return None
        for key, value in data.items():
            setattr(found, key, value)
        return found.model_copy()

    async def update_many(self, where, data):
        self._check("update_many")
        matched = [r for r in self.records if self._matches(r, where)]
        for record in matched:
            for key, value in data.items():
                setattr(record, key, value)
        return len(matched)

    async def upsert(self, where, data):
        self._check("upsert")
        found = self._find(where)
        if found is None:
            record = self.model(**data["create"])
            self.records.append(record)
            return record.model_copy()
        for key, value in data["update"].items():
            setattr(found, key, value)
        return found.model_copy()

    async def delete(self, where):
        self._check("delete")
        found = self._find(where)
        if found is not None:
            self.records.remove(found)
        return found


class FakePrisma:
    def __init__(self):
        self.user = FakeTable(User)
        self.forumcategory = FakeTable(ForumCategory)
        self.forumpost = FakeTable(ForumPost)
        self.notification = FakeTable(Notification)
        self.connected = True

    def is_connected(self):
        return self.connected

    async def connect(self):
        self.connected = True

    async def disconnect(self):
        self.connected = False

    async def query_raw(self, query):
        return [{"1": 1}]

    def add_user(self, **fields):
        fields.setdefault("email", f"{_id()[:8]}@example.com")
        fields.setdefault("name", "Test User")
        user = User(**fields)
        self.user.records.append(user)
        return user

    def add_notification(self, user, minutes_ago=0, **fields):
        fields.setdefault("type", "SYSTEM")
        fields.setdefault("title", "Hello")
        fields.setdefault("message", "Welcome to the pack")
        notification = Notification(
            userId=user.id,
            createdAt=_now() - timedelta(minutes=minutes_ago),
            **fields,
        )
        self.notification.records.append(notification)
        return notification


@pytest.fixture
def fake_db():
    return FakePrisma()


@pytest.fixture
def app(fake_db):
    fastapi_app.dependency_overrides[get_db] = lambda: fake_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def login_as(client):
    """Attach a valid session cookie for ``user`` to the test client."""
    def _login(user):
        client.cookies.set(config.AUTH_COOKIE_NAME, create_access_token(user))
        return client
    return _login


@pytest.fixture
def lenient_client(app):
    """Client that returns 500 responses instead of re-raising unhandled errors."""
    return TestClient(app, raise_server_exceptions=False)
