# backend/fitbook/routers/bookings.py
import logging
from typing import Any, Dict
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.status import HTTP_302_FOUND
from sqlalchemy.orm import Session

from ..core.bookings import add_booking, delete_booking, list_bookings, list_user_bookings, parse_booked_time
from ..core.credentials import get_user_by_id
from ..core.db import get_db
from ..core.errors import NotAuthenticated
from ..core.payload import read_payload
from ..core.session import require_login
from ..schemas.booking import dump_bookings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Bookings"])


def _text(payload: Dict[str, Any], key: str) -> str:
    return str(payload.get(key) or "").strip()


MAX_PRICE = 2_147_483_647  # INTEGER column


def _price(raw: Any) -> int:
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return 0
    return min(max(value, 0), MAX_PRICE)


@router.post("/book")
def book(
    request: Request,
    payload: Dict[str, Any] = Depends(read_payload),
    user: Dict[str, Any] = Depends(require_login),
    db: Session = Depends(get_db),
):
    trainer_id = _text(payload, "trainerId")
    class_id = _text(payload, "classId")
    trainer_name = _text(payload, "trainer")
    class_name = _text(payload, "class")
    price = _price(payload.get("price"))

    # e.g. "2025-11-05" and "13:30–15:00"
    booking_date = _text(payload, "date") or request.query_params.get("date", "").strip()
    time_slot = _text(payload, "timeSlot") or request.query_params.get("timeSlot", "").strip()
    booked_time = parse_booked_time(booking_date, time_slot)

    # signed cookie can outlive the account (e.g. after reset_db)
    if get_user_by_id(db, user["id"]) is None:
        raise NotAuthenticated(request.url.path)

    booking_id = add_booking(db, {
        "user_id": user["id"],
        "name": user.get("name") or "",
        "trainer": trainer_id or trainer_name,
        "klass": class_id or class_name,
        "price": price,
        "booked_time": booked_time,
    })
    logger.info("Booking %s created for user %s", booking_id, user["id"])

    query = urlencode({
        "id": str(booking_id),
        "name": user.get("name") or "",
        "trainer": trainer_name,
        "class": class_name,
        "price": str(price),
    })
    return RedirectResponse(url=f"/success.html?{query}", status_code=HTTP_302_FOUND)


# -------------------------------
# JSON API
# -------------------------------
@router.get("/api/bookings", dependencies=[Depends(require_login)])
def all_bookings(db: Session = Depends(get_db)):
    return dump_bookings(list_bookings(db))


@router.get("/api/bookings/me")
def my_bookings(user: Dict[str, Any] = Depends(require_login), db: Session = Depends(get_db)):
    return dump_bookings(list_user_bookings(db, user["id"]))


@router.delete("/api/bookings/{booking_id}")
def cancel_booking(
    booking_id: str,
    user: Dict[str, Any] = Depends(require_login),
    db: Session = Depends(get_db),
):
    booking_id = booking_id.strip()
    if not booking_id.isdecimal():
        return JSONResponse({"error": "Booking ID is required"}, status_code=400)
    try:
        # no-op when the booking belongs to someone else
        delete_booking(db, int(booking_id), user["id"])
    except Exception:
        logger.exception("Failed to cancel booking %s", booking_id)
        db.rollback()
        return JSONResponse({"error": "Failed to cancel booking"}, status_code=500)
    return {"message": "Booking cancelled"}
