from datetime import datetime

from fitbook.core.admin_report import render_admin_report
from fitbook.core.bookings import add_booking, list_bookings
from fitbook.models.dashboard_link import DashboardLink


def _seed_booking(db, user_id, name="alice", price=1500):
    return add_booking(db, {
        "user_id": user_id,
        "name": name,
        "trainer": "Mark Jensen",
        "klass": "Kettlebells",
        "price": price,
        "created_at": datetime(2025, 11, 1, 10, 0),
    })


def test_admin_forbidden_for_regular_user(alice_client):
    res = alice_client.get("/admin", follow_redirects=False)
    assert res.status_code == 403
    assert res.text == "Forbidden"


def test_admin_sees_all_bookings(admin_client, db, alice, bob):
    _seed_booking(db, alice)
    _seed_booking(db, bob, name="bob", price=800)

    res = admin_client.get("/admin")
    assert res.status_code == 200
    assert "Bookings (Admin)" in res.text
    assert "฿1,500" in res.text
    assert "฿800" in res.text
    assert ">bob<" in res.text
    # configured fallback when no link is stored
    assert "https://dashboard.example/report" in res.text


def test_admin_uses_stored_dashboard_link(admin_client, db):
    db.add(DashboardLink(name="Power BI", link="https://app.powerbi.com/view?r=abc"))
    db.commit()
    res = admin_client.get("/admin")
    assert "https://app.powerbi.com/view?r=abc" in res.text


def test_render_empty_report():
    html = render_admin_report([], None)
    assert "No bookings yet" in html
    assert "Open Power BI" in html


def test_render_escapes_booking_fields(db):
    add_booking(db, {"user_id": None, "name": "<script>alert(1)</script>", "trainer": "T", "klass": "C", "price": 1})
    html = render_admin_report(list_bookings(db), "https://example.com/x'y")
    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
    assert "x'y" not in html
