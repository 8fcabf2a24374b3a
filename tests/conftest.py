# File: tests/conftest.py

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cardapp.api.deps import get_db
from cardapp.core.security import create_access_token, hash_password
from cardapp.main import app
from cardapp.models.base import Base
from cardapp.models.card import Card
from cardapp.models.user import User

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

# Hashed once for the whole session
PASSWORD = "secret123"
PASSWORD_HASH = hash_password(PASSWORD)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    def _make_user(username: str = "alice", role: str = "user") -> User:
        user = User(
            username=username,
            email=f"{username}@example.com",
            hashed_password=PASSWORD_HASH,
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_card(db):
    def _make_card(
        owner: User,
        title: str = "Project",
        status: str = "todo",
        created_at: datetime = NOW,
        updated_at: datetime | None = None,
    ) -> Card:
        card = Card(
            id=str(uuid.uuid4()),
            owner_id=owner.id,
            title=title,
            description=f"{title} task",
            status=status,
            created_at=created_at,
            updated_at=updated_at or created_at,
        )
        db.add(card)
        db.commit()
        return card

    return _make_card


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}
