from fastapi.testclient import TestClient

from fitbook.core.config import settings
from fitbook.main import app
from fitbook.models.user import User


def test_login_page_is_public(client):
    for path in ("/", "/login.html", "/signup.html", "/success.html"):
        res = client.get(path)
        assert res.status_code == 200
        assert "text/html" in res.headers["content-type"]


def test_signup_then_login_gives_same_user(client, db):
    res = client.post(
        "/signup",
        data={"name": "dave", "password": "s3cret", "phone": "0899999999"},
        follow_redirects=False,
    )
    assert res.status_code == 302
    assert res.headers["location"].startswith("/login.html")

    stored = db.query(User).filter(User.name == "dave").one()

    res = client.post("/login", data={"name": " dave ", "password": "s3cret"}, follow_redirects=False)
    assert res.status_code == 302
    assert res.headers["location"] == "/trainers.html"
    assert settings.SESSION_COOKIE in res.cookies

    me = client.get("/api/me").json()
    assert me == {"id": stored.id, "name": "dave", "phone": "0899999999", "role": "user"}


def test_signup_accepts_json(client, db):
    res = client.post("/signup", json={"name": "erin", "password": "pw"}, follow_redirects=False)
    assert res.status_code == 302
    assert db.query(User).filter(User.name == "erin").count() == 1


def test_signup_duplicate_and_blank(client, alice):
    res = client.post("/signup", data={"name": "alice", "password": "x"}, follow_redirects=False)
    assert res.status_code == 409
    res = client.post("/signup", data={"name": "  ", "password": "x"}, follow_redirects=False)
    assert res.status_code == 400


def test_wrong_password_looks_like_unknown_user(client, alice):
    wrong = client.post("/login", data={"name": "alice", "password": "nope"}, follow_redirects=False)
    unknown = client.post("/login", data={"name": "mallory", "password": "nope"}, follow_redirects=False)
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.text == unknown.text
    assert "Invalid name or password" in wrong.text
    assert settings.SESSION_COOKIE not in wrong.cookies


def test_login_with_json_body(client, alice):
    res = client.post("/login", json={"name": "alice", "password": "pa55word"}, follow_redirects=False)
    assert res.status_code == 302


def test_api_me_never_exposes_password(alice_client):
    body = alice_client.get("/api/me").json()
    assert body["name"] == "alice"
    assert "password" not in body


def test_logout_clears_session(alice_client):
    assert alice_client.get("/api/me").status_code == 200
    res = alice_client.post("/logout", follow_redirects=False)
    assert res.status_code == 302
    assert res.headers["location"] == "/login.html"
    assert alice_client.get("/api/me").status_code == 401


def test_api_me_for_deleted_user(alice_client, db, alice):
    db.query(User).filter(User.id == alice).delete()
    db.commit()
    res = alice_client.get("/api/me")
    assert res.status_code == 404


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/health/db").json()["database"] == "ok"


def test_unhandled_error_is_generic_500(monkeypatch, alice):
    def boom(db):
        raise RuntimeError("connection string with password=hunter2")

    monkeypatch.setattr("fitbook.routers.bookings.list_bookings", boom)
    with TestClient(app, raise_server_exceptions=False) as c:
        c.post("/login", data={"name": "alice", "password": "pa55word"}, follow_redirects=False)
        res = c.get("/api/bookings")
    assert res.status_code == 500
    assert res.text == "Server error"
    assert "hunter2" not in res.text
