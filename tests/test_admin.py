# File: tests/test_admin.py

import logging

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cardapp.api.deps import get_db
from cardapp.db.init_db import seed_initial_data
from cardapp.main import app
from cardapp.models.user import User
from tests.conftest import auth_headers


@pytest.fixture(autouse=True)
def restore_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_all_cards_is_owner_only(client, make_user, make_card):
    owner = make_user("boss", role="owner")
    admin = make_user("root", role="admin")
    make_card(make_user("alice"), title="A")
    make_card(make_user("bob"), title="B")

    assert client.get("/api/v1/admin/cards", headers=auth_headers(admin)).status_code == 403

    resp = client.get("/api/v1/admin/cards", headers=auth_headers(owner))
    assert resp.status_code == 200
    owners = sorted(card["owner"]["username"] for card in resp.json())
    assert owners == ["alice", "bob"]


def test_read_and_change_log_level(client, make_user):
    headers = auth_headers(make_user("boss", role="owner"))

    resp = client.post("/api/v1/admin/log-level", json={"level": "debug"}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["currentLevel"] == "DEBUG"

    resp = client.get("/api/v1/admin/log-level", headers=headers)
    assert resp.json()["currentLevel"] == "DEBUG"
    assert "WARNING" in resp.json()["availableLevels"]


def test_invalid_log_level(client, make_user):
    headers = auth_headers(make_user("boss", role="owner"))
    resp = client.post("/api/v1/admin/log-level", json={"level": "silly"}, headers=headers)
    assert resp.status_code == 400


def test_whoami_is_admin_only(client, make_user):
    admin = make_user("root", role="admin")
    assert client.get("/api/v1/debug/whoami", headers=auth_headers(make_user())).status_code == 403

    resp = client.get("/api/v1/debug/whoami", headers=auth_headers(admin))
    assert resp.status_code == 200
    assert resp.json()["user"]["username"] == "root"
    assert resp.json()["authenticated"] is True


def test_seed_creates_default_accounts_once(db):
    seed_initial_data(db)
    seed_initial_data(db)

    roles = sorted(user.role for user in db.query(User).all())
    assert roles == ["admin", "owner"]


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "operational"

    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_database_status(client):
    resp = client.get("/debug/db")
    assert resp.status_code == 200
    assert resp.json()["database"]["status"] == "connected"
    assert resp.json()["database"]["dialect"] == "sqlite"


def test_database_status_when_store_is_down(client, tmp_path):
    broken = create_engine(f"sqlite:///{tmp_path}/missing/dir/cards.db")
    BrokenSession = sessionmaker(bind=broken)

    def broken_db():
        session = BrokenSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = broken_db

    resp = client.get("/debug/db")
    assert resp.status_code == 200
    assert resp.json()["database"]["status"] == "disconnected"
    broken.dispose()


def test_listed_card_urls_resolve_without_redirect(client, make_user):
    endpoints = client.get("/api/v1").json()["endpoints"]
    path = endpoints["getUserCards"].split()[1]

    resp = client.get(path, headers=auth_headers(make_user()), follow_redirects=False)
    assert resp.status_code == 200


def test_api_index_lists_stats_endpoint(client):
    resp = client.get("/api/v1")
    assert resp.status_code == 200
    assert "getCardStats" in resp.json()["endpoints"]
