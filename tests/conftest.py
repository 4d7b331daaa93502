import os
import tempfile

# Must be set before fitbook reads its settings.
_TMP_DIR = tempfile.mkdtemp(prefix="fitbook-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["SESSION_KEY"] = "test-session-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DASHBOARD_URL"] = "https://dashboard.example/report"

import pytest
from fastapi.testclient import TestClient

import fitbook.models  # noqa: F401
from fitbook.core.credentials import add_user
from fitbook.core.db import Base, SessionLocal, engine
from fitbook.main import app

PASSWORD = "pa55word"


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def _login(c, name, password=PASSWORD):
    res = c.post("/login", data={"name": name, "password": password}, follow_redirects=False)
    assert res.status_code == 302
    return res


@pytest.fixture
def alice(db):
    return add_user(db, "alice", PASSWORD, "0812345678")


@pytest.fixture
def bob(db):
    return add_user(db, "bob", PASSWORD)


@pytest.fixture
def admin_id(db):
    return add_user(db, "root", PASSWORD, role="admin")


@pytest.fixture
def alice_client(client, alice):
    _login(client, "alice")
    return client


@pytest.fixture
def admin_client(client, admin_id):
    _login(client, "root")
    return client
